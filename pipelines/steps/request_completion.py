from __future__ import annotations

from pipelines.runner import RunContext
from ports.llm import LLMClientPort


class RequestCompletion:
    def __init__(self, llm: LLMClientPort, use_case: str = "coach_matching") -> None:
        self.llm = llm
        self.use_case = use_case

    def run(self, ctx: RunContext) -> RunContext:
        if ctx.system_prompt is None or ctx.user_prompt is None:
            raise RuntimeError("RequestCompletion requires prompts; run BuildPrompts first")
        ctx.completion = self.llm.complete(
            use_case=self.use_case,
            system_prompt=ctx.system_prompt,
            user_prompt=ctx.user_prompt,
        )
        return ctx
