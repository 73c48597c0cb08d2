from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field

from services.errors import CoachDataError


def decode_list_field(raw: str | None, field_name: str = "field") -> list[str]:
    """Decode a JSON-serialized list column.

    Absent or empty values decode to []. Anything that is not a JSON list of
    scalars raises CoachDataError instead of silently defaulting; null and
    blank items are dropped.
    """
    if raw is None:
        return []
    text = raw.strip()
    if not text:
        return []
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise CoachDataError(f"Malformed {field_name} list: {e.msg} in {raw!r}") from e
    if not isinstance(value, list):
        raise CoachDataError(f"Malformed {field_name} list: expected JSON array, got {type(value).__name__}")
    for item in value:
        if isinstance(item, (list, dict)):
            raise CoachDataError(f"Malformed {field_name} list: nested {type(item).__name__} item in {raw!r}")
    return [str(item) for item in value if item is not None and str(item).strip()]


class CoachRecord(BaseModel):
    """One entry of the bundled coach dataset (read-only)."""

    id: str
    salesforce_id: str | None = None
    name: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    gender: str | None = None
    timezone: str | None = None
    seniority_score: int = Field(default=0, ge=0, le=8)
    icf_level: str | None = None
    practitioner_type: str | None = None
    bio: str | None = None
    headline: str | None = None
    notable_credentials: str | None = None
    special_services: str | None = None

    # JSON-serialized lists, decoded on access
    specialties: str | None = None
    industries: str | None = None
    companies: str | None = None

    is_scale_coach: bool = False
    is_grow_coach: bool = False
    is_exec_coach: bool = False
    is_complimentary_pilot: bool = False
    is_paid_pilot: bool = False
    is_active: bool = False

    active_client_count: int = 0
    photo_url: str | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    @property
    def industry_list(self) -> list[str]:
        return decode_list_field(self.industries, "industries")

    @property
    def company_list(self) -> list[str]:
        return decode_list_field(self.companies, "companies")

    @property
    def specialty_list(self) -> list[str]:
        return decode_list_field(self.specialties, "specialties")

    @property
    def product_lines(self) -> list[str]:
        flags = (
            (self.is_scale_coach, "SCALE"),
            (self.is_grow_coach, "GROW"),
            (self.is_exec_coach, "EXEC"),
        )
        return [label for enabled, label in flags if enabled]

    @property
    def display_first_name(self) -> str:
        if self.first_name:
            return self.first_name
        return self.name.split(" ")[0]
