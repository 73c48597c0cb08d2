from __future__ import annotations

from pipelines.runner import RunContext
from services.enrichment import enrich_recommendations


class EnrichRecommendations:
    def run(self, ctx: RunContext) -> RunContext:
        if ctx.result is None:
            raise RuntimeError("EnrichRecommendations requires a parsed result; run ParseCompletion first")
        ctx.recommendations = enrich_recommendations(ctx.result.recommendations, ctx.coaches)
        ctx.meta["unmatched_recommendations"] = sum(1 for r in ctx.recommendations if r.coach is None)
        return ctx
