# app/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.catalog import load_catalog
from app.core.config import settings
from app.core.logging_config import configure_logging
from app.llm.client import LLMClient
from app.llm.justifier import GenerativeJustifier
from app.mapping.assembler import MatrixAssembler
from app.mapping.reasoning import ReasoningSynthesizer
from app.middleware.request_logging import RequestLoggingMiddleware
from app.routers.catalog import router as catalog_router
from app.routers.health import router as health_router
from app.routers.llm_health import router as llm_health_router
from app.routers.matrix import router as matrix_router
from app.routers.root import router as root_router
from app.routers.syllabus import router as syllabus_router
from app.services.matrix_service import MatrixService
from app.core.exception_handlers import app_error_handler, unhandled_exception_handler
from app.core import AppError

configure_logging()

logger = logging.getLogger("app.main")


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    catalog = load_catalog(settings.CATALOG_PATH)
    llm_client = LLMClient.from_settings(settings)

    synthesizer = ReasoningSynthesizer(
        GenerativeJustifier(llm_client),
        enrichment_timeout_seconds=settings.LLM_MAX_ELAPSED_SECONDS + settings.LLM_TIMEOUT_SECONDS,
    )
    assembler = MatrixAssembler(
        catalog,
        synthesizer,
        concurrency=settings.MATRIX_ENRICHMENT_CONCURRENCY,
    )

    app.state.catalog = catalog
    app.state.llm_client = llm_client
    app.state.matrix_service = MatrixService(assembler)

    logger.info(
        "app.startup",
        extra={"app_name": settings.app_name, "env": settings.env, "llm_enabled": llm_client.enabled, "llm_provider": llm_client.provider.name},
    )
    yield


def create_app() -> FastAPI:
    app = FastAPI(title=getattr(settings, "PROJECT_NAME", "API"), lifespan=lifespan)

    app.add_middleware(RequestLoggingMiddleware)

    # ---- CORS (env-driven) ----
    # CORS_ALLOW_ORIGINS="http://localhost:3000,https://yourapp.vercel.app"
    allow_origins = _split_csv(getattr(settings, "CORS_ALLOW_ORIGINS", None))

    # Optional: allow all Vercel preview deployments
    allow_vercel_previews = bool(getattr(settings, "CORS_ALLOW_VERCEL_PREVIEWS", False))

    cors_kwargs = dict(
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", "x-request-id"],
    )

    if allow_vercel_previews:
        # Allows https://<anything>.vercel.app
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=r"^https:\/\/.*\.vercel\.app$",
            **cors_kwargs,
        )
    else:
        # If allow_origins is empty, default to localhost only.
        if not allow_origins:
            allow_origins = ["http://localhost:3000", "http://localhost:5173"]

        app.add_middleware(
            CORSMiddleware,
            allow_origins=allow_origins,
            **cors_kwargs,
        )

    # Exception handlers
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routers
    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(catalog_router)
    app.include_router(syllabus_router)
    app.include_router(matrix_router)
    app.include_router(llm_health_router)

    return app


app = create_app()
