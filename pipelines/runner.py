from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from models.coach_record import CoachRecord
from models.enriched import EnrichedRecommendation
from models.match_result import MatchResult
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    request_text: str = ""
    active_only: bool = True
    num_matches: int = 4
    coaches: List[CoachRecord] = field(default_factory=list)
    system_prompt: Optional[str] = None
    user_prompt: Optional[str] = None
    completion: Optional[str] = None
    result: Optional[MatchResult] = None
    recommendations: List[EnrichedRecommendation] = field(default_factory=list)
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            name = type(step).__name__
            t0 = time.time()
            ctx = step.run(ctx)
            logger.debug(
                "step done",
                extra={"step": name, "status": "ok", "duration_ms": int((time.time() - t0) * 1000)},
            )
        return ctx
