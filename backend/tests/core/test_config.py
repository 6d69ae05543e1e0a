from app.core.config import Settings


def test_google_key_takes_precedence_over_gemini_key():
    cfg = Settings(GOOGLE_API_KEY="g-key", GEMINI_API_KEY="legacy")
    assert cfg.google_api_key == "g-key"


def test_gemini_key_is_used_as_fallback():
    cfg = Settings(GOOGLE_API_KEY="", GEMINI_API_KEY=" legacy ")
    assert cfg.google_api_key == "legacy"


def test_cors_origins_are_split():
    assert Settings(CORS_ORIGINS="https://a.test, https://b.test").cors_origins == [
        "https://a.test",
        "https://b.test",
    ]
    assert Settings(CORS_ORIGINS="").cors_origins == ["*"]
