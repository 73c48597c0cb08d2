from __future__ import annotations

import logging

from pipelines.runner import RunContext
from services.response_parser import parse_match_result


logger = logging.getLogger(__name__)


class ParseCompletion:
    def run(self, ctx: RunContext) -> RunContext:
        ctx.result = parse_match_result(ctx.completion or "")
        returned = len(ctx.result.recommendations)
        ctx.meta["recommendations_returned"] = returned
        if returned != ctx.num_matches:
            # Tolerated: the model may return fewer when the pool is small
            logger.warning(
                f"Model returned {returned} recommendations, {ctx.num_matches} requested",
                extra={"step": "parse_completion", "status": "count_mismatch"},
            )
        return ctx
