import pytest
from fastapi.testclient import TestClient

from app.agents.answer import AnswerAgent
from app.core.config import Settings, get_settings
from app.core.llm.base import BaseLLM
from app.core.llm.schemas import GenerateConfig, LLMResponse
from app.main import app
from app.modules.bfhl.router import get_answer_agent_factory

TEST_EMAIL = "tester@example.edu"


class FakeLLM(BaseLLM):
    """Records prompts and replays a canned answer (or raises a canned error)."""

    def __init__(self, text: str = "Paris", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[tuple[str, GenerateConfig | None]] = []

    async def generate(self, prompt: str, config: GenerateConfig | None = None) -> LLMResponse:
        self.calls.append((prompt, config))
        if self.error is not None:
            raise self.error
        return LLMResponse(text=self.text, usage={})


@pytest.fixture()
def test_settings():
    return Settings(OFFICIAL_EMAIL=TEST_EMAIL, GOOGLE_API_KEY="", GEMINI_API_KEY="")


@pytest.fixture()
def fake_llm():
    return FakeLLM()


@pytest.fixture()
def client(test_settings, fake_llm):
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_answer_agent_factory] = lambda: lambda: AnswerAgent(llm=fake_llm)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
