from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from models.coach_record import CoachRecord
from models.enriched import CoachSummary, EnrichedRecommendation
from models.match_result import CoachRecommendation


logger = logging.getLogger(__name__)


def _index(coaches: Iterable[CoachRecord]) -> tuple[Dict[str, CoachRecord], Dict[str, CoachRecord]]:
    by_id: Dict[str, CoachRecord] = {}
    by_name: Dict[str, CoachRecord] = {}
    for c in coaches:
        by_id.setdefault(c.id, c)
        # First record in dataset order wins on duplicate names
        by_name.setdefault(c.name, c)
    return by_id, by_name


def find_coach(
    rec: CoachRecommendation,
    by_id: Dict[str, CoachRecord],
    by_name: Dict[str, CoachRecord],
) -> Optional[CoachRecord]:
    """Resolve by coach_id; fall back to an exact name match."""
    return by_id.get(rec.coach_id) or by_name.get(rec.name)


def enrich_recommendations(
    recommendations: Sequence[CoachRecommendation],
    coaches: Iterable[CoachRecord],
) -> List[EnrichedRecommendation]:
    """Attach a display projection to each recommendation.

    A coach that is not in `coaches` yields coach=None rather than an error.
    On a hit the record is authoritative: `coach_id` and `name` are rewritten
    from it so one recommendation never mixes two coaches.
    """
    by_id, by_name = _index(coaches)
    enriched: List[EnrichedRecommendation] = []
    for rec in recommendations:
        coach = find_coach(rec, by_id, by_name)
        fields = rec.model_dump()
        if coach is not None:
            if (rec.coach_id, rec.name) != (coach.id, coach.name):
                logger.warning(
                    f"Recommendation {rec.coach_id!r}/{rec.name!r} resolved to {coach.id!r}/{coach.name!r}",
                    extra={"step": "enrich", "status": "identity_mismatch"},
                )
            fields.update(coach_id=coach.id, name=coach.name)
        enriched.append(
            EnrichedRecommendation(
                **fields,
                coach=CoachSummary.from_record(coach) if coach else None,
            )
        )
    return enriched
