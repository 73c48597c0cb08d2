from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional, Tuple

from config.llm_routes import DEFAULT_MODELS, ROUTES
from config.settings import Settings, get_settings
from services.errors import UpstreamServiceError
from utils.llm_logger import log_call, sha256_text


logger = logging.getLogger(__name__)

UNEXPECTED_RESPONSE = "Unexpected response type"


class LLMClient:
    """Minimal wrapper to centralize per-use-case routing and logging.

    One blocking round trip per call: no streaming, no sampling parameters and
    no retries (SDK retries are disabled). The timeout comes from settings.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()

    def resolve_route(self, use_case: str) -> Dict[str, Any]:
        route = ROUTES.get(use_case, {})
        provider = (route.get("provider") or self.settings.llm_provider or "anthropic").lower()
        model = route.get("model") or self.settings.llm_model or DEFAULT_MODELS.get(provider)
        return {
            "provider": provider,
            "model": model,
            "max_tokens": self.settings.llm_max_tokens or route.get("max_tokens") or 4000,
            "operation": route.get("operation", use_case),
        }

    def complete(self, *, use_case: str, system_prompt: str, user_prompt: str) -> str:
        """Send the two-segment prompt and return the single text completion."""
        route = self.resolve_route(use_case)
        provider = route["provider"]
        if provider == "anthropic":
            call = self._complete_anthropic
        elif provider == "openai":
            call = self._complete_openai
        else:
            raise NotImplementedError(f"Provider not implemented: {provider}")

        t0 = time.time()
        status, error, usage = "ok", None, None
        try:
            text, usage = call(route, system_prompt, user_prompt)
            return text
        except Exception as e:
            status, error = "error", str(e) or type(e).__name__
            raise
        finally:
            duration_ms = int((time.time() - t0) * 1000)
            log_extra = {"step": "llm_request", "status": status, "duration_ms": duration_ms, "provider": provider}
            if error:
                logger.error(f"{use_case} call failed", extra={**log_extra, "error": error})
            else:
                logger.info(f"{use_case} call finished", extra=log_extra)
            log_call(
                caller=f"llm_client.complete:{use_case}",
                provider=provider,
                model=route["model"],
                operation=route["operation"],
                prompt_hash=sha256_text(system_prompt + "\n" + user_prompt),
                duration_ms=duration_ms,
                status=status,
                error=error,
                usage=usage,
            )

    def _complete_anthropic(self, route: Dict[str, Any], system_prompt: str, user_prompt: str) -> Tuple[str, Optional[Dict[str, Any]]]:
        import anthropic

        api_key = self.settings.anthropic_api_key
        if not api_key:
            raise UpstreamServiceError("ANTHROPIC_API_KEY missing")

        client = anthropic.Anthropic(
            api_key=api_key,
            timeout=self.settings.llm_timeout_seconds,
            max_retries=0,
        )
        try:
            message = client.messages.create(
                model=route["model"],
                max_tokens=route["max_tokens"],
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except anthropic.APIError as e:
            raise UpstreamServiceError(str(e) or "Model request failed") from e

        usage = None
        if getattr(message, "usage", None) is not None:
            usage = {
                "input_tokens": getattr(message.usage, "input_tokens", None),
                "output_tokens": getattr(message.usage, "output_tokens", None),
            }

        blocks = getattr(message, "content", None) or []
        if not blocks or getattr(blocks[0], "type", None) != "text":
            raise UpstreamServiceError(UNEXPECTED_RESPONSE)
        return blocks[0].text, usage

    def _complete_openai(self, route: Dict[str, Any], system_prompt: str, user_prompt: str) -> Tuple[str, Optional[Dict[str, Any]]]:
        import openai

        api_key = self.settings.openai_api_key
        if not api_key:
            raise UpstreamServiceError("OPENAI_API_KEY missing")

        client = openai.OpenAI(
            api_key=api_key,
            timeout=self.settings.llm_timeout_seconds,
            max_retries=0,
        )
        try:
            resp = client.chat.completions.create(
                model=route["model"],
                max_tokens=route["max_tokens"],
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except openai.OpenAIError as e:
            raise UpstreamServiceError(str(e) or "Model request failed") from e

        usage = None
        if getattr(resp, "usage", None) is not None:
            usage = {
                "prompt_tokens": getattr(resp.usage, "prompt_tokens", None),
                "completion_tokens": getattr(resp.usage, "completion_tokens", None),
                "total_tokens": getattr(resp.usage, "total_tokens", None),
            }

        content = resp.choices[0].message.content if resp.choices else None
        if not isinstance(content, str) or not content:
            raise UpstreamServiceError(UNEXPECTED_RESPONSE)
        return content, usage
