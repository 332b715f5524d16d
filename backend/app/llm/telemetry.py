# app/llm/telemetry.py

import logging
import time
from dataclasses import asdict, dataclass, field

logger = logging.getLogger("llm")

@dataclass
class LLMCallLog:
    trace_id: str
    provider: str
    purpose: str
    prompt_name: str
    prompt_version: str
    latency_ms: int
    retries: int
    ok: bool
    model: str | None = None
    models_tried: list[str] = field(default_factory=list)
    error_type: str | None = None

def now_ms() -> int:
    return int(time.monotonic() * 1000)

def log_llm_call(item: LLMCallLog) -> None:
    level = logging.INFO if item.ok else logging.WARNING
    logger.log(level, "llm_call", extra=asdict(item))
