from __future__ import annotations

from typing import Optional, Protocol, Tuple


class SharesRepoPort(Protocol):
    def insert(self, slug: str, coaches_json: str, request_summary: Optional[str] = None) -> int:
        ...

    def get_by_slug(self, slug: str) -> Optional[Tuple]:
        ...
