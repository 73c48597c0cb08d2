from __future__ import annotations

import logging
import time
from typing import Iterable, Optional

from config.settings import Settings, get_settings
from models.coach_record import CoachRecord
from models.enriched import MatchResponse
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import BuildPrompts, EnrichRecommendations, FilterCoaches, ParseCompletion, RequestCompletion
from ports.llm import LLMClientPort
from services.errors import InvalidRequestError


logger = logging.getLogger(__name__)


def build_match_pipeline(coaches: Iterable[CoachRecord], llm: LLMClientPort, settings: Optional[Settings] = None) -> Pipeline:
    settings = settings or get_settings()
    return Pipeline([
        FilterCoaches(coaches, min_bio_length=settings.min_bio_length),
        BuildPrompts(bio_excerpt_chars=settings.bio_excerpt_chars),
        RequestCompletion(llm),
        ParseCompletion(),
        EnrichRecommendations(),
    ])


def validate_match_request(request_text: Optional[str], num_matches: Optional[int], settings: Settings) -> tuple[str, int]:
    text = (request_text or "").strip()
    if not text:
        raise InvalidRequestError("Request text is required")
    n = settings.default_num_matches if num_matches is None else num_matches
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidRequestError("Number of matches must be an integer")
    if not 1 <= n <= settings.max_num_matches:
        raise InvalidRequestError(f"Number of matches must be between 1 and {settings.max_num_matches}")
    return text, n


def run_match(
    request_text: Optional[str],
    *,
    coaches: Iterable[CoachRecord],
    llm: LLMClientPort,
    active_only: bool = True,
    num_matches: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> MatchResponse:
    """Match a free-text coaching request against the dataset.

    Raises InvalidRequestError for bad input; UpstreamServiceError,
    ResponseParseError or CoachDataError for downstream failures.
    """
    settings = settings or get_settings()
    text, n = validate_match_request(request_text, num_matches, settings)

    ctx = RunContext(request_text=text, active_only=active_only, num_matches=n)
    t0 = time.time()
    ctx = build_match_pipeline(coaches, llm, settings).run(ctx)
    logger.info(
        f"Matched request: {ctx.meta.get('recommendations_returned')} recommendations "
        f"from {ctx.meta.get('eligible_coaches')} eligible coaches",
        extra={"step": "match", "status": "ok", "duration_ms": int((time.time() - t0) * 1000)},
    )
    return MatchResponse(parsed_requirements=ctx.result.parsed_requirements, recommendations=ctx.recommendations)  # type: ignore[union-attr]
