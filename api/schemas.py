"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models.shared_recommendation import CoachSnapshot


class MatchRequest(BaseModel):
    """Body of POST /api/match. Accepts snake_case or camelCase keys."""

    request_text: str = Field(default="", alias="requestText", description="Free-text coaching request")
    active_only: bool = Field(default=True, alias="activeOnly", description="Only match active coaches")
    num_matches: Optional[int] = Field(
        default=None, alias="numMatches", description="Recommendations to return (server default when omitted)"
    )

    model_config = ConfigDict(populate_by_name=True)


class ShareCreateRequest(BaseModel):
    """Body of POST /api/share.

    Either full recommendation snapshots or plain coach ids; ids are frozen
    into snapshots from the dataset at creation time.
    """

    recommendations: list[CoachSnapshot] = Field(default_factory=list)
    coach_ids: list[str] = Field(default_factory=list, alias="coachIds")
    request_summary: Optional[str] = Field(default=None, alias="requestSummary")

    model_config = ConfigDict(populate_by_name=True)


class ShareCreateResponse(BaseModel):
    slug: str
    url: str = Field(..., description="Public link to the share page")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="ok")
    coaches: int = Field(..., description="Number of coaches loaded")


class ErrorResponse(BaseModel):
    """Error envelope returned for every failure."""

    error: str = Field(..., description="Error message")
