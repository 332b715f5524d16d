"""
catalog.py
- Purpose: Expose the PO/PSO reference catalog for the UI (titles, levels, PIs).
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_catalog_dict

router = APIRouter(prefix="/api", tags=["Catalog"])


@router.get("/po-data")
def get_po_data(data: dict = Depends(get_catalog_dict)):
    return data
