from fastapi import APIRouter, Depends

from app.api.deps import get_catalog
from app.catalog.models import Catalog

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health(catalog: Catalog = Depends(get_catalog)):
    return {
        "status": "ok",
        "catalog": {"pos": len(catalog.po_ids), "psos": len(catalog.pso_ids)},
    }
