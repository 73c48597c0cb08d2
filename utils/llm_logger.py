from __future__ import annotations

import hashlib
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)


def sha256_text(text: Optional[str]) -> Optional[str]:
    if not text:
        return None
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def log_call(
    *,
    caller: str,
    provider: str,
    model: Optional[str],
    operation: str,
    prompt_hash: Optional[str] = None,
    duration_ms: Optional[int] = None,
    status: str = "ok",
    error: Optional[str] = None,
    usage: Optional[Dict[str, Any]] = None,
    extras: Optional[Dict[str, Any]] = None,
) -> None:
    """Append a single JSON line describing a model call if tracing is enabled.

    Controlled by LLM_TRACE / LLM_LOG_PATH (see config/settings.py). Tracing
    failures are logged and swallowed so they never fail a match request.
    """
    from config.settings import get_settings

    # Ensure latest env changes (tests may monkeypatch env between calls)
    get_settings.cache_clear()
    settings = get_settings()
    if not settings.llm_trace:
        return

    payload: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "caller": caller,
        "provider": provider,
        "model": model,
        "operation": operation,
        "prompt_hash": prompt_hash,
        "duration_ms": duration_ms,
        "status": status,
        "error": error,
        "usage": usage or {},
    }
    if extras:
        # Nested under a dedicated key to avoid collisions
        payload["extras"] = extras

    log_path = Path(settings.llm_log_path)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(payload, ensure_ascii=False) + "\n")
    except OSError as e:
        logger.warning("LLM trace write failed", extra={"step": "llm_trace", "status": "error", "error": str(e)})
