# app/llm/client.py
"""
LLMClient
- Constructed once at startup (see app/main.py lifespan) and injected.
- Walks an ordered list of candidate models. Each model gets bounded
  exponential backoff on retryable errors; any failure moves on to the next
  model. The whole call is capped by a total elapsed-time budget.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass
from typing import Awaitable, Callable, Sequence

from app.core.config import Settings, settings
from app.llm.errors import LLMConfigError, LLMError, LLMNonRetryableError, LLMRetryableError
from app.llm.prompts.registry import get_prompt
from app.llm.providers.gemini import GeminiProvider
from app.llm.telemetry import LLMCallLog, log_llm_call, now_ms
from app.llm.types import LLMProvider, LLMRequest, LLMResponse

logger = logging.getLogger("app.llm.client")


def _render_template(template: str, variables: dict) -> str:
    out = template
    for k, v in variables.items():
        out = out.replace("{{" + k + "}}", str(v))
    return out


@dataclass
class _Attempts:
    retries: int = 0


class LLMClient:
    def __init__(
        self,
        provider: LLMProvider,
        *,
        models: Sequence[str],
        enabled: bool = True,
        temperature: float = 0.3,
        max_output_tokens: int = 150,
        timeout_seconds: int = 15,
        max_retries: int = 2,
        backoff_initial_seconds: float = 1.0,
        backoff_max_seconds: float = 10.0,
        max_elapsed_seconds: float = 30.0,
        log_prompts: bool = False,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.provider = provider
        self.models = list(models)
        self._enabled = enabled
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.timeout_seconds = timeout_seconds
        self.max_retries = max_retries
        self.backoff_initial_seconds = backoff_initial_seconds
        self.backoff_max_seconds = backoff_max_seconds
        self.max_elapsed_seconds = max_elapsed_seconds
        self.log_prompts = log_prompts
        self._sleep = sleep
        self._clock = clock

    @classmethod
    def from_settings(cls, cfg: Settings = settings) -> "LLMClient":
        if cfg.LLM_PROVIDER != "gemini":
            raise LLMConfigError(f"Unsupported provider: {cfg.LLM_PROVIDER}")
        return cls(
            GeminiProvider(api_key=cfg.GEMINI_API_KEY),
            models=cfg.gemini_models,
            enabled=cfg.LLM_ENABLED,
            temperature=cfg.LLM_TEMPERATURE,
            max_output_tokens=cfg.LLM_MAX_OUTPUT_TOKENS,
            timeout_seconds=cfg.LLM_TIMEOUT_SECONDS,
            max_retries=cfg.LLM_MAX_RETRIES,
            backoff_initial_seconds=cfg.LLM_BACKOFF_INITIAL_SECONDS,
            backoff_max_seconds=cfg.LLM_BACKOFF_MAX_SECONDS,
            max_elapsed_seconds=cfg.LLM_MAX_ELAPSED_SECONDS,
            log_prompts=cfg.LLM_LOG_PROMPTS,
        )

    @property
    def enabled(self) -> bool:
        return self._enabled and bool(self.models) and self.provider.configured

    def backoff_delay(self, attempt: int) -> float:
        return min(self.backoff_max_seconds, self.backoff_initial_seconds * (2 ** attempt))

    async def _generate_with_backoff(
        self, req: LLMRequest, prompt: str, deadline: float, attempts: _Attempts
    ) -> LLMResponse:
        for attempt in range(self.max_retries + 1):
            try:
                resp = await self.provider.generate(req, prompt)
            except LLMRetryableError:
                remaining = deadline - self._clock()
                if attempt >= self.max_retries or remaining <= 0:
                    raise
                attempts.retries += 1
                await self._sleep(min(self.backoff_delay(attempt), remaining))
                continue

            if not resp.output_text.strip():
                raise LLMNonRetryableError(f"Empty output from {req.model}")
            return resp

        raise LLMRetryableError(f"{req.model} failed after retries")

    async def generate(
        self,
        *,
        purpose: str,
        prompt_name: str,
        prompt_version: str,
        variables: dict,
        response_mime_type: str | None = None,
    ) -> LLMResponse:
        trace_id = str(uuid.uuid4())

        if not self.enabled:
            raise LLMConfigError("LLM enrichment is disabled or not configured")

        # Ensure repair placeholder exists and is empty by default
        safe_vars = dict(variables)
        safe_vars.setdefault("__REPAIR_INSTRUCTIONS__", "")

        tmpl = get_prompt(prompt_name, prompt_version)
        rendered = _render_template(tmpl.template, safe_vars)
        if self.log_prompts:
            logger.debug("llm.prompt", extra={"trace_id": trace_id, "prompt_name": prompt_name, "prompt": rendered})

        start_ms = now_ms()
        deadline = self._clock() + self.max_elapsed_seconds
        attempts = _Attempts()
        tried: list[str] = []
        last_err: LLMError | None = None

        def _log(ok: bool, model: str | None, err: Exception | None = None) -> None:
            log_llm_call(
                LLMCallLog(
                    trace_id=trace_id,
                    provider=self.provider.name,
                    purpose=purpose,
                    prompt_name=prompt_name,
                    prompt_version=prompt_version,
                    latency_ms=(now_ms() - start_ms),
                    retries=attempts.retries,
                    ok=ok,
                    model=model,
                    models_tried=list(tried),
                    error_type=type(err).__name__ if err else None,
                )
            )

        for model in self.models:
            if self._clock() >= deadline:
                break
            tried.append(model)

            req = LLMRequest(
                trace_id=trace_id,
                purpose=purpose,
                prompt_name=prompt_name,
                prompt_version=prompt_version,
                variables=safe_vars,
                provider=self.provider.name,
                model=model,
                temperature=self.temperature,
                max_output_tokens=self.max_output_tokens,
                timeout_seconds=self.timeout_seconds,
                response_mime_type=response_mime_type,
            )

            try:
                resp = await self._generate_with_backoff(req, rendered, deadline, attempts)
            except LLMConfigError as e:
                _log(False, model, e)
                raise
            except LLMError as e:
                last_err = e
                continue

            _log(True, model)
            return LLMResponse(
                trace_id=resp.trace_id,
                provider=resp.provider,
                model=resp.model,
                output_text=resp.output_text,
                latency_ms=resp.latency_ms,
                retries=attempts.retries,
                raw=resp.raw,
                input_tokens=resp.input_tokens,
                output_tokens=resp.output_tokens,
            )

        err = last_err or LLMRetryableError("LLM time budget exhausted before any model answered")
        _log(False, tried[-1] if tried else None, err)
        raise err
