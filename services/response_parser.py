from __future__ import annotations

import json
import re

from pydantic import ValidationError

from models.match_result import MatchResult
from services.errors import ResponseParseError


_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


def strip_code_fence(text: str) -> str:
    """Return the body of the first fenced block, or the trimmed text if there is none."""
    m = _FENCE_RE.search(text)
    if m:
        return m.group(1).strip()
    return text.strip()


def _describe_validation_error(e: ValidationError) -> str:
    parts = []
    for err in e.errors()[:5]:
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc or '<root>'}: {err.get('msg')}")
    more = f" (+{e.error_count() - 5} more)" if e.error_count() > 5 else ""
    return "; ".join(parts) + more


def parse_match_result(text: str) -> MatchResult:
    """Decode and validate a model completion. No partial recovery."""
    body = strip_code_fence(text or "")
    if not body:
        raise ResponseParseError("Model returned an empty response")
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Model response is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    if not isinstance(data, dict):
        raise ResponseParseError(f"Model response must be a JSON object, got {type(data).__name__}")
    try:
        return MatchResult.model_validate(data)
    except ValidationError as e:
        raise ResponseParseError(f"Model response failed validation: {_describe_validation_error(e)}") from e
