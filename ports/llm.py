from __future__ import annotations

from typing import Protocol


class LLMClientPort(Protocol):
    def complete(self, *, use_case: str, system_prompt: str, user_prompt: str) -> str:
        ...
