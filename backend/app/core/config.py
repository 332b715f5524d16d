# app/core/config.py
import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent

class Settings(BaseSettings):
    app_name: str = "CO-PO Mapper"
    env: str = "local"
    PROJECT_NAME: str = "CO-PO-PSO Mapping API"

    # CORS
    CORS_ALLOW_ORIGINS: str | None = None
    CORS_ALLOW_VERCEL_PREVIEWS: bool = False

    # Reference catalog (built-in CSE catalog when unset)
    CATALOG_PATH: str | None = None

    # =========================
    # LLM enrichment
    # =========================
    LLM_ENABLED: bool = True
    LLM_PROVIDER: str = "gemini"
    GEMINI_API_KEY: str | None = None

    # Ordered candidate models; the client moves to the next one on failure
    GEMINI_MODELS: str = "gemini-2.0-flash-lite,gemini-2.0-flash,gemini-1.5-flash,gemini-1.5-pro"

    # Runtime controls
    LLM_TIMEOUT_SECONDS: int = 15
    LLM_MAX_RETRIES: int = 2
    LLM_BACKOFF_INITIAL_SECONDS: float = 1.0
    LLM_BACKOFF_MAX_SECONDS: float = 10.0
    LLM_MAX_ELAPSED_SECONDS: float = 30.0
    LLM_MAX_OUTPUT_TOKENS: int = 150
    LLM_TEMPERATURE: float = 0.3

    # Observability
    LLM_LOG_PROMPTS: bool = False  # keep False by default (avoid leaking data)

    # Matrix generation
    MATRIX_ENRICHMENT_CONCURRENCY: int = 4

    # Syllabus upload
    SYLLABUS_MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024

    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def gemini_models(self) -> list[str]:
        return [m.strip() for m in (self.GEMINI_MODELS or "").split(",") if m.strip()]

settings = Settings()
