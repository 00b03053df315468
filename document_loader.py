import io

import pypdf
import pytesseract
from PIL import Image

from logger import get_logger
from utils.exceptions import ExtractionError, UnsupportedFileTypeError

# Initialize logger
logger = get_logger(__name__)

PDF_MIME_TYPE = "application/pdf"
IMAGE_MIME_PREFIX = "image/"


class DocumentLoader:
    """Extracts plain text from in-memory PDF and image uploads."""

    @staticmethod
    def is_supported(mime_type: str | None) -> bool:
        if not mime_type:
            return False
        return mime_type == PDF_MIME_TYPE or mime_type.startswith(IMAGE_MIME_PREFIX)

    @staticmethod
    def _load_pdf(data: bytes) -> str:
        """Reads the text layer of every page using pypdf."""
        reader = pypdf.PdfReader(io.BytesIO(data))
        text = ""
        for page in reader.pages:
            text += (page.extract_text() or "") + "\n"
        return text

    @staticmethod
    def _load_image(data: bytes, language: str = "eng", timeout: float = 0) -> str:
        """Runs Tesseract OCR over a raster image.

        A non-zero `timeout` kills the tesseract process once it elapses.
        """
        with Image.open(io.BytesIO(data)) as image:
            return pytesseract.image_to_string(image, lang=language, timeout=timeout)

    @staticmethod
    def load_document(
        data: bytes, mime_type: str | None, language: str = "eng", timeout: float = 0
    ) -> str:
        """Dispatches on the declared media type.

        Raises:
            UnsupportedFileTypeError: before any decoding, if the type is
                neither PDF nor an image.
            ExtractionError: if the decoder fails.
        """
        if not DocumentLoader.is_supported(mime_type):
            logger.error(f"Invalid document type: {mime_type}")
            raise UnsupportedFileTypeError(mime_type)

        logger.info(f"Loading document: {mime_type}, {len(data)} bytes")
        try:
            if mime_type == PDF_MIME_TYPE:
                return DocumentLoader._load_pdf(data)
            return DocumentLoader._load_image(data, language, timeout)
        except Exception as e:
            logger.exception(f"Error loading {mime_type} document: {e}")
            raise ExtractionError(str(e)) from e
