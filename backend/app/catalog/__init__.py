from app.catalog.loader import build_catalog, load_catalog
from app.catalog.models import Catalog, Competency, Outcome

__all__ = ["Catalog", "Competency", "Outcome", "build_catalog", "load_catalog"]
