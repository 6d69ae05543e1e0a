from typing import Dict, Tuple

from app.core.config import settings
from app.core.llm.base import BaseLLM
from app.core.llm.providers.google import GoogleProvider


PROVIDER_ALIASES = {
    "gemini": "google",
}

LLM_REGISTRY = {
    "google": GoogleProvider,
}

PROVIDER_CONFIG: Dict[str, dict[str, str]] = {
    "google": {
        "api_key_attr": "google_api_key",
    },
}


# cache instance per (provider, model)
_instances: Dict[Tuple[str, str], BaseLLM] = {}


def _resolve_api_key(provider: str) -> str:
    provider = PROVIDER_ALIASES.get(provider, provider)
    cfg = PROVIDER_CONFIG.get(provider, {})
    attr = cfg.get("api_key_attr", "")
    if attr:
        val = getattr(settings, attr, "")
        if val:
            return str(val)
    return ""


def create_llm(
    provider: str | None = None,
    model: str | None = None,
    api_key: str | None = None,
    use_cache: bool = True,
) -> BaseLLM:
    """Build (or reuse) a provider client.

    Credentials are not checked here; a missing key only fails once the
    provider is actually called.
    """
    provider = (provider or settings.LLM_PROVIDER).strip().lower()
    provider = PROVIDER_ALIASES.get(provider, provider)
    model = model or settings.LLM_MODEL
    api_key = api_key or _resolve_api_key(provider)

    if provider not in LLM_REGISTRY:
        raise ValueError(f"Unsupported LLM provider: {provider}")
    key = (provider, model)

    if use_cache and key in _instances:
        return _instances[key]

    llm_class = LLM_REGISTRY[provider]

    instance = llm_class(
        api_key=api_key,
        model=model,
    )

    if use_cache:
        _instances[key] = instance

    return instance


def clear_llm_cache() -> None:
    """Clear cached LLM instances so next call picks up new config."""
    _instances.clear()
