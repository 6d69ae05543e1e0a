from pathlib import Path

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

from app.modules.bfhl.numeric import MAX_FIBONACCI_TERMS

ENV_FILE = Path(__file__).resolve().parents[3] / ".env"
load_dotenv(dotenv_path=ENV_FILE)


class Settings(BaseSettings):
    # Echoed back in every /bfhl and /health response
    OFFICIAL_EMAIL: str = ""

    # AI delegate
    LLM_PROVIDER: str = "google"
    LLM_MODEL: str = "gemini-2.5-flash"
    GOOGLE_API_KEY: str = ""
    GEMINI_API_KEY: str = ""
    AI_MAX_OUTPUT_TOKENS: int = 50
    AI_TEMPERATURE: float = 0.3

    # Upper bound on the "fibonacci" count; terms grow linearly in bits
    FIBONACCI_MAX_TERMS: int = MAX_FIBONACCI_TERMS

    # Server
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"

    @property
    def google_api_key(self) -> str:
        # GEMINI_API_KEY is the older name, still honoured.
        return (self.GOOGLE_API_KEY or self.GEMINI_API_KEY or "").strip()

    @property
    def cors_origins(self) -> list[str]:
        origins = [item.strip() for item in (self.CORS_ORIGINS or "").split(",")]
        return [item for item in origins if item] or ["*"]

    class Config:
        env_file = str(ENV_FILE)
        extra = "ignore"


settings = Settings()


def get_settings() -> Settings:
    return settings
