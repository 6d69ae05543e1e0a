from app.agents.answer.agent import AnswerAgent
from app.core.config import Settings, settings as default_settings
from app.core.llm import create_llm
from app.core.llm.base import BaseLLM


def create_answer_agent(
    llm: BaseLLM | None = None,
    settings: Settings | None = None,
) -> AnswerAgent:
    cfg = settings or default_settings
    answer_llm = llm or create_llm(
        provider=cfg.LLM_PROVIDER,
        model=cfg.LLM_MODEL,
        api_key=cfg.google_api_key or None,
    )
    return AnswerAgent(
        llm=answer_llm,
        max_tokens=cfg.AI_MAX_OUTPUT_TOKENS,
        temperature=cfg.AI_TEMPERATURE,
    )


__all__ = ["AnswerAgent", "create_answer_agent"]
