from fastapi import Depends, Request

from app.catalog.models import Catalog
from app.core.config import settings
from app.llm.client import LLMClient
from app.services.matrix_service import MatrixService
from app.services.syllabus_service import SyllabusService


def get_catalog(request: Request) -> Catalog:
    """The reference catalog loaded once in the app lifespan."""
    return request.app.state.catalog


def get_llm_client(request: Request) -> LLMClient:
    return request.app.state.llm_client


def get_matrix_service(request: Request) -> MatrixService:
    """
    Service dependency for matrix generation.
    Overridable via app.dependency_overrides in tests (e.g. template-only reasoning).
    """
    return request.app.state.matrix_service


def get_syllabus_service() -> SyllabusService:
    return SyllabusService(max_bytes=settings.SYLLABUS_MAX_UPLOAD_BYTES)


def get_catalog_dict(catalog: Catalog = Depends(get_catalog)) -> dict:
    return catalog.to_dict()
