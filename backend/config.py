import os
from typing import Literal

from pydantic_settings import BaseSettings


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
    database_url: str = "sqlite:///./resume_analysis.db"
    max_upload_size_mb: int = 10
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Hosted LLM (Ollama-compatible chat API)
    ollama_base_url: str = "https://ollama.com"
    ollama_api_key: str = ""
    ollama_model: str = "gpt-oss:120b"
    llm_max_attempts: int = 3
    llm_retry_delay_ms: int = 800

    rate_limit: str = "10/minute"
    rate_limit_enabled: bool = True

    # Name heuristic for the contact extractor: "strict" | "loose"
    name_policy: Literal["strict", "loose"] = "strict"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
