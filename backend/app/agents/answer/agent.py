import logging

from app.agents.answer.normalize import normalize_answer
from app.agents.answer.prompts import build_one_word_prompt
from app.agents.base import AgentResult, BaseAgent
from app.core.config import settings
from app.core.errors import AiRequestFailedError, EmptyResponseError, InvalidArgumentError
from app.core.llm.base import BaseLLM
from app.core.llm.schemas import GenerateConfig

logger = logging.getLogger(__name__)

AI_FAILURE_MESSAGE = "AI API request failed"


class AnswerAgent(BaseAgent):
    """Agent that answers a free-form question with exactly one word.

    The provider is called once per question. Provider errors are logged
    here and replaced by a generic failure so nothing provider-specific
    reaches the API caller.
    """

    def __init__(
        self,
        llm: BaseLLM,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ):
        super().__init__(llm)
        self.max_tokens = settings.AI_MAX_OUTPUT_TOKENS if max_tokens is None else max_tokens
        self.temperature = settings.AI_TEMPERATURE if temperature is None else temperature

    def _config(self) -> GenerateConfig:
        return GenerateConfig(max_tokens=self.max_tokens, temperature=self.temperature)

    async def execute(self, input_text: str, context: dict | None = None) -> AgentResult:
        if not isinstance(input_text, str) or not input_text.strip():
            raise InvalidArgumentError("Question must be a non-empty string")

        prompt = build_one_word_prompt(input_text)
        try:
            response = await self.llm.generate(prompt, self._config())
        except Exception as exc:
            logger.error("AI provider call failed: %s", exc)
            raise AiRequestFailedError(AI_FAILURE_MESSAGE) from exc

        raw_text = getattr(response, "text", "") or ""
        logger.debug("Raw AI response: %r", raw_text)

        try:
            answer = normalize_answer(raw_text)
        except EmptyResponseError as exc:
            logger.error("AI response unusable (%s): %r", exc.message, raw_text)
            raise AiRequestFailedError(AI_FAILURE_MESSAGE) from exc

        logger.debug("Cleaned AI response: %s", answer)
        return AgentResult(
            output=answer,
            metadata={"raw": raw_text, "usage": getattr(response, "usage", {})},
        )

    async def answer(self, question: str) -> str:
        result = await self.execute(question)
        return result.output
