from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence

from pydantic import ValidationError

from models.coach_record import CoachRecord, decode_list_field
from services.errors import CoachDataError


logger = logging.getLogger(__name__)


class CoachDataset:
    """Immutable snapshot of the coach dataset.

    Loaded wholesale once and shared read-only across requests. There is no
    reload path; a new file means a new CoachDataset instance.
    """

    def __init__(self, coaches: Sequence[CoachRecord], source: str | None = None) -> None:
        by_id: dict[str, CoachRecord] = {}
        for coach in coaches:
            if coach.id in by_id:
                raise CoachDataError(f"Duplicate coach id in dataset: {coach.id}")
            # Decode every serialized list up front so a malformed file fails at load
            for field_name in ("industries", "companies", "specialties"):
                decode_list_field(getattr(coach, field_name), f"{coach.id}.{field_name}")
            by_id[coach.id] = coach
        self._coaches: tuple[CoachRecord, ...] = tuple(coaches)
        self._by_id: Mapping[str, CoachRecord] = MappingProxyType(by_id)
        self.source = source

    @classmethod
    def from_file(cls, path: str | Path) -> "CoachDataset":
        path = Path(path)
        if not path.exists():
            raise CoachDataError(f"Coach dataset not found: {path}")
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise CoachDataError(f"Coach dataset is not valid JSON: {path}: {e}") from e
        # Accept a bare array or {"coaches": [...]}
        items = raw.get("coaches") if isinstance(raw, dict) else raw
        if not isinstance(items, list):
            raise CoachDataError(f"Coach dataset must be a JSON array of coach records: {path}")

        coaches: list[CoachRecord] = []
        for idx, item in enumerate(items):
            try:
                coaches.append(CoachRecord.model_validate(item))
            except ValidationError as e:
                raise CoachDataError(f"Invalid coach record at index {idx} in {path}: {e}") from e
        dataset = cls(coaches, source=str(path))
        logger.info(f"Loaded {len(dataset)} coaches from {path}", extra={"step": "load_dataset", "status": "ok"})
        return dataset

    @property
    def coaches(self) -> tuple[CoachRecord, ...]:
        return self._coaches

    def get(self, coach_id: str) -> Optional[CoachRecord]:
        return self._by_id.get(coach_id)

    def __len__(self) -> int:
        return len(self._coaches)

    def __iter__(self) -> Iterator[CoachRecord]:
        return iter(self._coaches)


@lru_cache(maxsize=None)
def get_dataset(path: str | None = None) -> CoachDataset:
    """Process-wide dataset per file, loaded on first use.

    Defaults to settings.coaches_path. The API app factory and every CLI
    command go through here, so a file is parsed once per process.
    """
    if path is None:
        from config.settings import get_settings

        path = get_settings().coaches_path
    return CoachDataset.from_file(str(path))
