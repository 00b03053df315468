import pytest
from fastapi.testclient import TestClient

from config import Settings
from llm.llm_service import LLMService
from main import app
from services.extraction_service import ExtractionService
from services.generate_question_service import GenerateQuestionService
from services.service import get_extraction_service, get_generate_question_service


class FakeLLMService(LLMService):
    """Returns a canned reply, or raises a canned error, without network."""

    def __init__(self, reply: str = "[]", error: Exception | None = None):
        super().__init__()
        self.reply = reply
        self.error = error
        self.prompts = []

    async def get_response(self, prompt: str, **kwargs) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply

    def list_models(self):
        return ["fake-model"]

    def health(self) -> bool:
        return True


@pytest.fixture
def settings():
    return Settings(
        _env_file=None, gemini_api_key="test-key", extraction_timeout=5, llm_timeout=5
    )


@pytest.fixture
def fake_llm():
    return FakeLLMService()


@pytest.fixture
def client(settings, fake_llm):
    app.dependency_overrides[get_extraction_service] = lambda: ExtractionService(
        settings
    )
    app.dependency_overrides[get_generate_question_service] = (
        lambda: GenerateQuestionService(settings, llm_service=fake_llm)
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
