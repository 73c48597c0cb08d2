from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ParsedRequirements(BaseModel):
    """LLM structured output: what the model understood from the request."""

    seniority_level: str
    industry: str | None = None
    gender_preference: str | None = None
    key_focus_areas: list[str] = Field(default_factory=list)
    other_notes: str | None = None

    model_config = ConfigDict(extra="ignore")


class CoachRecommendation(BaseModel):
    """LLM structured output: one ranked coach."""

    coach_id: str
    name: str
    match_score: float = Field(ge=0, le=100)
    rationale: str
    key_strengths: list[str] = Field(default_factory=list)
    potential_concerns: str | None = None

    model_config = ConfigDict(extra="ignore")


class MatchResult(BaseModel):
    """LLM structured output: strict top-level shape of a match completion."""

    parsed_requirements: ParsedRequirements
    recommendations: list[CoachRecommendation]

    model_config = ConfigDict(extra="ignore")
