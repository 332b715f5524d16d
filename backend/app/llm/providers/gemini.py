# app/llm/providers/gemini.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from app.llm.errors import LLMConfigError, LLMNonRetryableError, LLMRetryableError
from app.llm.telemetry import now_ms
from app.llm.types import LLMRequest, LLMResponse

_RETRYABLE_HINTS = ("429", "rate", "quota", "500", "502", "503", "504", "temporarily", "overloaded", "capacity")


@dataclass
class GeminiProvider:
    """
    Gemini provider using Google Gen AI SDK (google-genai), async surface.
    Single-attempt. Retries/backoff and model fallback handled by app/llm/client.py.
    """
    api_key: str | None = None
    name: str = "gemini"
    _client: Optional[genai.Client] = None

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> genai.Client:
        if not self.api_key:
            raise LLMConfigError("GEMINI_API_KEY is missing")
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, req: LLMRequest, prompt: str) -> LLMResponse:
        client = self._get_client()
        start_ms = now_ms()

        try:
            # HttpOptions timeout is milliseconds
            http_opts = types.HttpOptions(timeout=int(req.timeout_seconds * 1000))

            cfg = types.GenerateContentConfig(
                temperature=req.temperature,
                max_output_tokens=req.max_output_tokens,
                response_mime_type=req.response_mime_type,
                http_options=http_opts,
            )

            resp = await client.aio.models.generate_content(
                model=req.model,
                contents=prompt,
                config=cfg,
            )

            text = (getattr(resp, "text", None) or "").strip()

            input_tokens = None
            output_tokens = None
            usage = getattr(resp, "usage_metadata", None)
            if usage is not None:
                input_tokens = getattr(usage, "prompt_token_count", None)
                output_tokens = getattr(usage, "candidates_token_count", None)

            return LLMResponse(
                trace_id=req.trace_id,
                provider=self.name,
                model=req.model,
                output_text=text,
                latency_ms=now_ms() - start_ms,
                retries=0,
                raw={"sdk_response_type": str(type(resp))},
                input_tokens=input_tokens,
                output_tokens=output_tokens,
            )

        # ---- classify retryable failures first (so client.py retries) ----
        except (httpx.TimeoutException, TimeoutError) as e:
            raise LLMRetryableError(f"Gemini call timed out: {e}") from e
        except genai_errors.APIError as e:
            code = getattr(e, "code", None) or 0
            if code == 429 or code >= 500:
                raise LLMRetryableError(f"Gemini {code} (retryable): {e}") from e
            raise LLMNonRetryableError(f"Gemini {code}: {e}") from e
        except httpx.HTTPError as e:
            raise LLMRetryableError(f"Gemini http error (retryable): {e}") from e
        except Exception as e:
            msg = str(e).lower()
            if any(x in msg for x in _RETRYABLE_HINTS):
                raise LLMRetryableError(f"Gemini retryable failure: {e}") from e
            raise LLMNonRetryableError(f"Gemini non-retryable failure: {e}") from e
