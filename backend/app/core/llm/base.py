from abc import ABC, abstractmethod

from app.core.llm.schemas import GenerateConfig, LLMResponse


class BaseLLM(ABC):
    @abstractmethod
    async def generate(self, prompt: str, config: GenerateConfig | None = None) -> LLMResponse:
        """Generate a completion for a single prompt."""
        pass
