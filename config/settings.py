from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_COACHES_PATH = PROJECT_ROOT / "data" / "coaches.json"


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Provider credentials
    anthropic_api_key: str | None
    openai_api_key: str | None

    # Model call
    llm_provider: str  # anthropic | openai
    llm_model: str | None
    llm_max_tokens: int
    llm_timeout_seconds: float

    # Data / storage
    coaches_path: str
    db_path: str

    # Matching knobs
    min_bio_length: int
    bio_excerpt_chars: int
    default_num_matches: int
    max_num_matches: int

    # Runtime
    log_level: str
    run_env: str

    # HTTP server
    public_base_url: str = "http://localhost:8000"
    host: str = "127.0.0.1"
    port: int = 8000

    # Logging/tracing
    llm_trace: bool = False
    llm_log_path: str = "logs/llm_calls.jsonl"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    default_num = int(os.getenv("DEFAULT_NUM_MATCHES", "4"))
    max_num = int(os.getenv("MAX_NUM_MATCHES", "8"))
    if not 1 <= default_num <= max_num:
        raise RuntimeError(
            f"DEFAULT_NUM_MATCHES={default_num} must be between 1 and MAX_NUM_MATCHES={max_num}"
        )
    return Settings(
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY"),
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        llm_provider=os.getenv("LLM_PROVIDER", "anthropic").lower(),
        llm_model=os.getenv("LLM_MODEL"),
        llm_max_tokens=int(os.getenv("LLM_MAX_TOKENS", "4000")),
        llm_timeout_seconds=float(os.getenv("LLM_TIMEOUT_SECONDS", "120")),
        coaches_path=os.getenv("COACHES_PATH", str(DEFAULT_COACHES_PATH)),
        db_path=os.getenv("DB_PATH", "shares.db"),
        min_bio_length=int(os.getenv("MIN_BIO_LENGTH", "100")),
        bio_excerpt_chars=int(os.getenv("BIO_EXCERPT_CHARS", "600")),
        default_num_matches=default_num,
        max_num_matches=max_num,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        public_base_url=os.getenv("PUBLIC_BASE_URL", "http://localhost:8000").rstrip("/"),
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        llm_trace=_as_bool(os.getenv("LLM_TRACE")),
        llm_log_path=os.getenv("LLM_LOG_PATH", "logs/llm_calls.jsonl"),
    )
