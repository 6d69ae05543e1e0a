import google.generativeai as genai

from app.core.llm.base import BaseLLM
from app.core.llm.schemas import GenerateConfig, LLMResponse


class GoogleProvider(BaseLLM):
    def __init__(self, api_key: str, model: str):
        genai.configure(api_key=api_key)
        self._model = model

    def _build_config(self, config: GenerateConfig) -> genai.types.GenerationConfig:
        params: dict = {
            "temperature": config.temperature,
            "top_p": config.top_p,
        }
        if config.max_tokens is not None:
            params["max_output_tokens"] = config.max_tokens
        if config.stop is not None:
            params["stop_sequences"] = config.stop
        return genai.types.GenerationConfig(**params)

    @staticmethod
    def _usage(response) -> dict:
        metadata = getattr(response, "usage_metadata", None)
        if metadata is None:
            return {}
        return {
            "prompt_tokens": getattr(metadata, "prompt_token_count", 0),
            "completion_tokens": getattr(metadata, "candidates_token_count", 0),
            "total_tokens": getattr(metadata, "total_token_count", 0),
        }

    async def generate(self, prompt: str, config: GenerateConfig | None = None) -> LLMResponse:
        config = config or GenerateConfig()
        model = genai.GenerativeModel(self._model)
        response = await model.generate_content_async(
            prompt,
            generation_config=self._build_config(config),
        )
        text = getattr(response, "text", "") or ""
        return LLMResponse(text=text, usage=self._usage(response))
