import asyncio
from typing import List

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from config import Settings
from llm.llm_service import LLMService as BaseLLMService
from logger import get_logger
from utils.exceptions import LLMRateLimitError, LLMServiceError

logger = get_logger(__name__)

RATE_LIMIT_ERRORS = (
    google_exceptions.ResourceExhausted,
    google_exceptions.TooManyRequests,
)


class LLMService(BaseLLMService):
    def __init__(self, settings: Settings):
        """Initialize the LLM service with Gemini API client."""
        super().__init__()
        if not settings.gemini_api_key:
            raise LLMServiceError("GEMINI_API_KEY not found in environment variables")

        genai.configure(api_key=settings.gemini_api_key)

        self.model_name = settings.gemini_model
        self.model = genai.GenerativeModel(self.model_name)
        self.generation_config = {
            "temperature": settings.gemini_temperature,
            "max_output_tokens": settings.gemini_max_tokens,
        }
        self.timeout = settings.llm_timeout

    def list_models(self) -> List[str]:
        """Lists available Gemini models."""
        try:
            models = []
            for m in genai.list_models():
                if "generateContent" in m.supported_generation_methods:
                    models.append(m.name)
            return models
        except Exception as e:
            logger.exception(f"Failed to list models: {e}")
            return []

    def health(self) -> bool:
        """Checks if the Gemini API is accessible."""
        return bool(self.list_models())

    async def get_response(self, prompt: str, **kwargs) -> str:
        """Generates a response using Gemini."""
        logger.debug(f"Prompt: {prompt[:100]}...")
        try:
            response = await asyncio.wait_for(
                self.model.generate_content_async(
                    [{"role": "user", "parts": [{"text": prompt}]}],
                    generation_config=self.generation_config,
                    request_options={"timeout": self.timeout},
                ),
                timeout=self.timeout,
            )
            return response.text
        except RATE_LIMIT_ERRORS as e:
            logger.warning(f"Gemini rate limit hit: {e}")
            raise LLMRateLimitError(str(e)) from e
        except asyncio.TimeoutError as e:
            logger.error(f"Gemini call timed out after {self.timeout}s")
            raise LLMServiceError(
                f"Gemini call timed out after {self.timeout} seconds"
            ) from e
        except Exception as e:
            logger.exception(f"Error calling Gemini: {e}")
            raise LLMServiceError(str(e)) from e
