"""Question Generation Service sends extracted text to the LLM and
normalizes the reply into question records."""

from typing import List, Optional

from config import Settings
from llm.llm_gemini import LLMService as GeminiLLMService
from llm.llm_service import LLMService
from logger import get_logger
from utils.common import timing_decorator
from utils.question_utils import normalize_questions
from utils.response_format import QuestionRecord, QuestionType

logger = get_logger(__name__)


class GenerateQuestionService:
    def __init__(self, settings: Settings, llm_service: Optional[LLMService] = None):
        """Initialize the question generation service.

        The Gemini client is built on first use so that a missing API key
        fails the generation request rather than application startup.
        """
        self.settings = settings
        self._llm_service = llm_service
        logger.info("Generate Question Service initialized")

    @property
    def llm_service(self) -> LLMService:
        if self._llm_service is None:
            self._llm_service = GeminiLLMService(self.settings)
        return self._llm_service

    @timing_decorator
    async def generate_questions(
        self,
        extracted_text: str,
        question_type: QuestionType,
        question_count: int,
        prompt: Optional[str] = None,
    ) -> List[QuestionRecord]:
        """Generates questions for the given text.

        Args:
            extracted_text: Text previously returned by the upload endpoint
            question_type: MCQ, Short or Broad
            question_count: Number of questions requested
            prompt: Optional steering text, reserved for future use

        Returns:
            List of question records; a single raw-output record if the
            reply could not be parsed.

        Raises:
            LLMRateLimitError, LLMServiceError: from the LLM call.
        """
        logger.info(
            f"Generating {question_count} questions, type={question_type.value}, text_length={len(extracted_text)}"
        )
        if prompt:
            logger.debug(f"Steering prompt supplied but not used: {prompt[:100]}")

        reply = await self.llm_service.generate_questions(
            extracted_text, question_type.value, question_count
        )
        questions = normalize_questions(reply, question_type)
        logger.info(f"Generated {len(questions)} questions")
        return questions
