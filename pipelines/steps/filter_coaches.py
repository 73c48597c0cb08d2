from __future__ import annotations

from typing import Iterable

from models.coach_record import CoachRecord
from pipelines.runner import RunContext
from services.coach_filter import DEFAULT_MIN_BIO_LENGTH, filter_coaches


class FilterCoaches:
    def __init__(self, coaches: Iterable[CoachRecord], min_bio_length: int = DEFAULT_MIN_BIO_LENGTH) -> None:
        self.coaches = coaches
        self.min_bio_length = min_bio_length

    def run(self, ctx: RunContext) -> RunContext:
        ctx.coaches = filter_coaches(self.coaches, ctx.active_only, self.min_bio_length)
        ctx.meta["eligible_coaches"] = len(ctx.coaches)
        return ctx
