from __future__ import annotations

from typing import Iterable, List, Optional

from models.coach_record import CoachRecord


DEFAULT_BIO_EXCERPT_CHARS = 600
NOT_AVAILABLE = "N/A"


def _or_na(value: Optional[str], fallback: str = NOT_AVAILABLE) -> str:
    return value if value else fallback


def _join_or_na(items: List[str]) -> str:
    return ", ".join(items) if items else NOT_AVAILABLE


def bio_excerpt(bio: Optional[str], max_chars: int = DEFAULT_BIO_EXCERPT_CHARS) -> str:
    if not bio:
        return NOT_AVAILABLE
    if len(bio) > max_chars:
        return bio[:max_chars] + "..."
    return bio


def format_coach(coach: CoachRecord, bio_excerpt_chars: int = DEFAULT_BIO_EXCERPT_CHARS) -> str:
    """Render one coach as a context paragraph.

    Raises CoachDataError when a serialized list field is malformed.
    """
    specialties = coach.special_services or _join_or_na(coach.specialty_list)
    products = ", ".join(coach.product_lines) or "None specified"
    lines = [
        (
            f"**{coach.name}** [id: {coach.id}] | {_or_na(coach.gender)} | "
            f"Seniority: {coach.seniority_score}/8 | {_or_na(coach.icf_level)} | {_or_na(coach.timezone)}"
        ),
        (
            f"Type: {_or_na(coach.practitioner_type, 'Unknown')} | "
            f"Industries: {_join_or_na(coach.industry_list)} | "
            f"Companies: {_join_or_na(coach.company_list)}"
        ),
        f"Products: {products}",
        f"Specialties: {specialties}",
        f"Headline: {_or_na(coach.headline)}",
        f"Bio excerpt: {bio_excerpt(coach.bio, bio_excerpt_chars)}",
        "---",
    ]
    return "\n".join(lines)


def format_coach_context(coaches: Iterable[CoachRecord], bio_excerpt_chars: int = DEFAULT_BIO_EXCERPT_CHARS) -> str:
    return "\n".join(format_coach(c, bio_excerpt_chars) for c in coaches)
