from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from models.coach_record import CoachRecord
from models.match_result import CoachRecommendation, ParsedRequirements


class CoachSummary(BaseModel):
    """Display-safe projection of a CoachRecord attached to a recommendation."""

    id: str
    name: str
    first_name: str
    photo_url: str | None = None
    headline: str | None = None
    gender: str | None = None
    seniority_score: int
    icf_level: str | None = None
    practitioner_type: str | None = None
    timezone: str | None = None
    email: str | None = None
    bio: str | None = None

    @classmethod
    def from_record(cls, coach: CoachRecord) -> "CoachSummary":
        return cls(
            id=coach.id,
            name=coach.name,
            first_name=coach.display_first_name,
            photo_url=coach.photo_url,
            headline=coach.headline,
            gender=coach.gender,
            seniority_score=coach.seniority_score,
            icf_level=coach.icf_level,
            practitioner_type=coach.practitioner_type,
            timezone=coach.timezone,
            email=coach.email,
            bio=coach.bio,
        )


class EnrichedRecommendation(CoachRecommendation):
    coach: CoachSummary | None = None


class MatchResponse(BaseModel):
    parsed_requirements: ParsedRequirements
    recommendations: list[EnrichedRecommendation]

    model_config = ConfigDict(extra="forbid")
