# app/llm/errors.py
class LLMError(Exception):
    """Base LLM error (wrapped)."""

class LLMRetryableError(LLMError):
    """Transient error: timeouts, 429s, 5xx, network."""

class LLMNonRetryableError(LLMError):
    """Bad request, auth, unknown model, empty output. Next candidate model may still work."""

class LLMConfigError(LLMNonRetryableError):
    """Missing API key / unsupported provider. No candidate model can work."""
