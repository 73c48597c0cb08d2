from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from models.coach_record import CoachRecord
from models.enriched import EnrichedRecommendation


class CoachSnapshot(BaseModel):
    """Frozen copy of one shared coach; the share page renders from this alone."""

    coach_id: str
    name: str
    first_name: str | None = None
    headline: str | None = None
    photo_url: str | None = None
    email: str | None = None
    match_score: float | None = None
    rationale: str | None = None
    key_strengths: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_record(cls, coach: CoachRecord) -> "CoachSnapshot":
        return cls(
            coach_id=coach.id,
            name=coach.name,
            first_name=coach.display_first_name,
            headline=coach.headline,
            photo_url=coach.photo_url,
            email=coach.email,
        )

    @classmethod
    def from_recommendation(cls, rec: EnrichedRecommendation) -> "CoachSnapshot":
        coach = rec.coach
        return cls(
            coach_id=coach.id if coach else rec.coach_id,
            name=coach.name if coach else rec.name,
            first_name=coach.first_name if coach else None,
            headline=coach.headline if coach else None,
            photo_url=coach.photo_url if coach else None,
            email=coach.email if coach else None,
            match_score=rec.match_score,
            rationale=rec.rationale,
            key_strengths=list(rec.key_strengths),
        )


class SharedRecommendation(BaseModel):
    """App/DB record shape of a persisted share link."""

    slug: str
    coaches: list[CoachSnapshot]
    request_summary: str | None = None
    created_at: str | None = None

    @property
    def coach_ids(self) -> list[str]:
        return [c.coach_id for c in self.coaches]
