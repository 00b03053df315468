"""Extraction Service runs document text extraction off the event loop."""

import asyncio

from config import Settings
from document_loader import DocumentLoader
from logger import get_logger
from utils.common import timing_decorator
from utils.exceptions import ExtractionError, UnsupportedFileTypeError

logger = get_logger(__name__)


class ExtractionService:
    def __init__(self, settings: Settings):
        self.timeout = settings.extraction_timeout
        self.ocr_language = settings.ocr_language
        logger.info("Extraction Service initialized")

    @timing_decorator
    async def extract_text(self, data: bytes, mime_type: str | None) -> str:
        """Extracts the text of an uploaded document.

        Args:
            data: Raw file bytes
            mime_type: Declared media type of the upload

        Returns:
            The concatenated text of the document
        """
        # unsupported types never reach a worker thread
        if not DocumentLoader.is_supported(mime_type):
            raise UnsupportedFileTypeError(mime_type)

        try:
            return await asyncio.wait_for(
                asyncio.to_thread(
                    DocumentLoader.load_document,
                    data,
                    mime_type,
                    self.ocr_language,
                    self.timeout,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Extraction timed out after {self.timeout}s")
            raise ExtractionError(
                f"Extraction timed out after {self.timeout} seconds"
            ) from e
