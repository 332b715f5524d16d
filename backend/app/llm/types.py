# app/llm/types.py
from dataclasses import dataclass
from typing import Any, Protocol

JsonDict = dict[str, Any]

@dataclass(frozen=True)
class LLMRequest:
    trace_id: str
    purpose: str                    # e.g. "justify_mapping", "healthcheck"
    prompt_name: str                # registry key
    prompt_version: str             # e.g. "v1"
    variables: JsonDict             # variables for prompt template

    provider: str                   # "gemini"
    model: str                      # candidate currently being tried

    temperature: float
    max_output_tokens: int
    timeout_seconds: int

    response_mime_type: str | None = None  # e.g. "application/json"

@dataclass(frozen=True)
class LLMResponse:
    trace_id: str
    provider: str
    model: str
    output_text: str

    # Optional metadata (provider-dependent)
    latency_ms: int
    retries: int
    raw: JsonDict | None = None
    input_tokens: int | None = None
    output_tokens: int | None = None


class LLMProvider(Protocol):
    name: str

    @property
    def configured(self) -> bool: ...

    async def generate(self, req: LLMRequest, prompt: str) -> LLMResponse: ...
