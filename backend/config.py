import os
from pydantic_settings import BaseSettings

from services.pipeline.fallback import FallbackPolicy


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    # API access
    api_key: str = "resume-match-dev-key"
    api_key_header: str = "X-API-Key"
    require_api_key: bool = True

    max_upload_size_mb: int = 10
    cors_origins: list[str] = ["*"]
    rate_limit: str = "60/minute"
    rate_limit_enabled: bool = True

    log_level: str = "INFO"
    log_file: str = ""

    # Fixed per-rule confidences reported with extracted fields
    email_confidence: float = 0.99
    phone_confidence: float = 0.85
    name_confidence: float = 0.75
    skill_confidence: float = 0.90
    section_confidence: float = 0.88

    skill_vocabulary: list[str] = [
        "C#", ".NET", "ASP.NET", "JavaScript", "Python",
        "SQL", "Azure", "Docker", "React", "Angular",
    ]

    # "placeholder" degrades to an empty result, "propagate" re-raises
    resume_fallback: FallbackPolicy = FallbackPolicy.PLACEHOLDER
    portfolio_fallback: FallbackPolicy = FallbackPolicy.PLACEHOLDER
    placeholder_text: str = ""

    tesseract_lang: str = "eng"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "protected_namespaces": ("settings_",)}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
