import copy

import pytest

from app.catalog import build_catalog
from app.mapping.assembler import MatrixAssembler
from app.mapping.reasoning import ReasoningSynthesizer
from app.mapping.types import CourseOutcome

# Single-word descriptions keep keyword matching predictable.
SAMPLE_CATALOG = {
    "PO1": {
        "title": "Engineering knowledge",
        "cognitiveLevel": 3,
        "competencies": {
            "1.1": {
                "description": "zebra",
                "performanceIndicators": {"1.1.1": "alpha", "1.1.2": "bravo", "1.1.3": "charlie"},
            },
            "1.2": {
                "description": "delta",
                "performanceIndicators": {"1.2.1": "echo", "1.2.2": "foxtrot"},
            },
        },
    },
    "PO2": {
        "title": "Problem analysis",
        "cognitiveLevel": "K4",
        "competencies": {
            "2.1": {
                "description": "kilo",
                "performanceIndicators": {"2.1.1": "lima", "2.1.2": "mike", "2.1.3": "november"},
            },
        },
    },
    "PSO1": {
        "title": "Software systems",
        "cognitiveLevel": 2,
        "competencies": {
            "13.1": {
                "description": "hotel",
                "performanceIndicators": {"13.1.1": "india", "13.1.2": "juliet"},
            },
        },
    },
}


@pytest.fixture
def raw_catalog():
    return copy.deepcopy(SAMPLE_CATALOG)


@pytest.fixture
def catalog(raw_catalog):
    return build_catalog(raw_catalog)


@pytest.fixture
def assembler(catalog):
    return MatrixAssembler(catalog, ReasoningSynthesizer(), concurrency=2)


@pytest.fixture
def make_co():
    def _make(co_id: str, text: str, level: int = 3) -> CourseOutcome:
        return CourseOutcome(id=co_id, description=text, cognitive_level=level)
    return _make
