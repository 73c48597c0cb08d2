from __future__ import annotations

import os


# Central routing for LLM use-cases. Edit here to change per-operation defaults.
# You can also override per-route model via env vars for quick testing.
#
# Keys are use_case identifiers consumed by services/llm_client.py
ROUTES: dict[str, dict] = {
    # Coach ranking over the filtered dataset
    "coach_matching": {
        "provider": os.getenv("LLM_MATCHING_PROVIDER"),  # falls back to settings.llm_provider
        "model": os.getenv("LLM_MODEL_MATCHING"),  # falls back to settings.llm_model, then DEFAULT_MODELS
        "max_tokens": 4000,
        # Logical operation name for logging (not a vendor API name)
        "operation": "coach_matching",
    },
}

DEFAULT_MODELS: dict[str, str] = {
    "anthropic": "claude-sonnet-4-20250514",
    "openai": "gpt-4o-mini",
}
