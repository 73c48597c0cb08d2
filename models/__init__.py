from .coach_record import CoachRecord, decode_list_field
from .match_result import CoachRecommendation, MatchResult, ParsedRequirements
from .enriched import CoachSummary, EnrichedRecommendation, MatchResponse
from .shared_recommendation import CoachSnapshot, SharedRecommendation

__all__ = [
    "CoachRecord",
    "decode_list_field",
    "CoachRecommendation",
    "MatchResult",
    "ParsedRequirements",
    "CoachSummary",
    "EnrichedRecommendation",
    "MatchResponse",
    "CoachSnapshot",
    "SharedRecommendation",
]
