from abc import ABC, abstractmethod
from typing import List

from logger import get_logger
from utils.prompt import PromptService

logger = get_logger(__name__)


class LLMService(ABC):
    def __init__(self):
        pass

    @abstractmethod
    async def get_response(self, prompt: str, **kwargs) -> str:
        """
        Generates a single text reply from the LLM.

        Args:
            prompt: The full instruction sent as the user turn.
            **kwargs: Additional arguments for the specific LLM implementation.

        Returns:
            The reply text, unmodified.

        Raises:
            LLMRateLimitError: the provider reported a rate limit.
            LLMServiceError: any other transport failure or timeout.
        """
        pass

    @abstractmethod
    def list_models(self) -> List[str]:
        """Lists available models for the service."""
        pass

    @abstractmethod
    def health(self) -> bool:
        """Checks the health/availability of the LLM service."""
        pass

    async def generate_questions(
        self,
        text: str,
        question_type: str,
        question_count: int,
    ) -> str:
        """Asks the LLM for `question_count` questions about `text` and
        returns its raw reply."""
        prompt = PromptService.get_questions_generate_prompt(
            text, question_type, question_count
        )
        logger.debug(f"Generating {question_count} {question_type} questions")
        return await self.get_response(prompt)
