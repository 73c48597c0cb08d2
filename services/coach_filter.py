from __future__ import annotations

from typing import Iterable, List

from models.coach_record import CoachRecord


DEFAULT_MIN_BIO_LENGTH = 100


def has_usable_bio(coach: CoachRecord, min_bio_length: int = DEFAULT_MIN_BIO_LENGTH) -> bool:
    return bool(coach.bio) and len(coach.bio) > min_bio_length


def filter_coaches(
    coaches: Iterable[CoachRecord],
    active_only: bool,
    min_bio_length: int = DEFAULT_MIN_BIO_LENGTH,
) -> List[CoachRecord]:
    """Return the coaches eligible for matching, in dataset order.

    The result is both the prompt context and the enrichment lookup universe.
    """
    return [
        c
        for c in coaches
        if (not active_only or c.is_active) and has_usable_bio(c, min_bio_length)
    ]
