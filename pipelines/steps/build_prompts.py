from __future__ import annotations

from pipelines.runner import RunContext
from services.context_formatter import DEFAULT_BIO_EXCERPT_CHARS
from services.prompt_builder import build_prompts


class BuildPrompts:
    def __init__(self, bio_excerpt_chars: int = DEFAULT_BIO_EXCERPT_CHARS) -> None:
        self.bio_excerpt_chars = bio_excerpt_chars

    def run(self, ctx: RunContext) -> RunContext:
        prompts = build_prompts(ctx.request_text, ctx.coaches, ctx.num_matches, self.bio_excerpt_chars)
        ctx.system_prompt = prompts.system
        ctx.user_prompt = prompts.user
        return ctx
