from __future__ import annotations

import json
import logging
import secrets
import sqlite3
from typing import Callable, Iterable, List, Optional, Sequence

from pydantic import ValidationError

from models.match_result import ParsedRequirements
from models.shared_recommendation import CoachSnapshot, SharedRecommendation
from ports.repos import SharesRepoPort
from services.coach_dataset import CoachDataset
from services.errors import InvalidRequestError, StorageError


logger = logging.getLogger(__name__)

SLUG_LENGTH = 10


def generate_slug(length: int = SLUG_LENGTH) -> str:
    """Random URL-safe slug ([A-Za-z0-9_-]). Collisions are not retried."""
    slug = ""
    while len(slug) < length:
        slug += secrets.token_urlsafe(length)
    return slug[:length]


def summarize_requirements(parsed: Optional[ParsedRequirements]) -> Optional[str]:
    if parsed is None:
        return None
    return f"{parsed.seniority_level} - {', '.join(parsed.key_focus_areas)}"


def snapshots_from_coach_ids(coach_ids: Iterable[str], dataset: CoachDataset) -> List[CoachSnapshot]:
    """Freeze the live dataset entries for a plain id selection."""
    snapshots: List[CoachSnapshot] = []
    unknown: List[str] = []
    seen = set()
    for coach_id in coach_ids:
        if coach_id in seen:
            continue
        seen.add(coach_id)
        coach = dataset.get(coach_id)
        if coach is None:
            unknown.append(coach_id)
            continue
        snapshots.append(CoachSnapshot.from_record(coach))
    if unknown:
        raise InvalidRequestError(f"Unknown coach id(s): {', '.join(unknown)}")
    return snapshots


def create_share(
    repo: SharesRepoPort,
    snapshots: Sequence[CoachSnapshot],
    request_summary: Optional[str] = None,
    slug_factory: Callable[[], str] = generate_slug,
) -> str:
    """Persist the selected coaches under a new slug and return the slug."""
    if not snapshots:
        raise InvalidRequestError("At least one coach must be selected")

    slug = slug_factory()
    coaches_json = json.dumps([s.model_dump() for s in snapshots], ensure_ascii=False)
    try:
        repo.insert(slug, coaches_json, request_summary or None)
    except sqlite3.Error as e:
        logger.error("Share insert failed", extra={"step": "create_share", "status": "error", "slug": slug, "error": str(e)})
        raise StorageError(str(e)) from e

    logger.info(f"Created share with {len(snapshots)} coaches", extra={"step": "create_share", "status": "ok", "slug": slug})
    return slug


def get_share(repo: SharesRepoPort, slug: str) -> Optional[SharedRecommendation]:
    """Fetch a share by slug. Absent, unreadable or undecodable rows are None."""
    try:
        row = repo.get_by_slug(slug)
    except sqlite3.Error as e:
        logger.error("Share lookup failed", extra={"step": "get_share", "status": "error", "slug": slug, "error": str(e)})
        return None
    if not row:
        return None

    stored_slug, coaches_json, request_summary, created_at = row
    try:
        coaches = [CoachSnapshot.model_validate(c) for c in json.loads(coaches_json)]
    except (json.JSONDecodeError, TypeError, ValidationError) as e:
        logger.error("Stored share is unreadable", extra={"step": "get_share", "status": "error", "slug": slug, "error": str(e)})
        return None
    return SharedRecommendation(
        slug=stored_slug,
        coaches=coaches,
        request_summary=request_summary,
        created_at=created_at,
    )
