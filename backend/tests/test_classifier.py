import pytest

from app.mapping.classifier import (
    classify,
    coverage_band,
    qualitative_correlation,
    quantitative_correlation,
    reconcile,
)
from app.mapping.matcher import match


@pytest.mark.parametrize(
    "percent,expected",
    [(0.0, 1), (39.9, 1), (40.0, 2), (60.0, 2), (60.1, 3), (100.0, 3)],
)
def test_coverage_band_boundaries(percent, expected):
    assert coverage_band(percent) == expected


def test_three_of_five_is_exactly_sixty():
    assert quantitative_correlation(3, 5) == 2
    assert quantitative_correlation(4, 5) == 3
    assert quantitative_correlation(0, 0) is None


def test_qualitative_correlation():
    assert qualitative_correlation(4, 3) == 3
    assert qualitative_correlation(3, 3) == 2
    assert qualitative_correlation(2, 3) == 1


def test_reconcile_guard_rails():
    # two or more levels below -> 1 regardless of coverage
    assert reconcile(2, 4, 3) == 1
    # one level below caps high coverage at 2
    assert reconcile(3, 4, 3) == 2
    assert reconcile(3, 4, 1) == 1
    # at or above: coverage wins
    assert reconcile(4, 4, 3) == 3
    assert reconcile(6, 4, 1) == 1
    # no PIs: qualitative
    assert reconcile(5, 4, None) == 3


def test_classify_high_coverage(catalog):
    po1 = catalog.outcomes["PO1"]
    result = classify(3, po1, match("alpha bravo charlie echo", po1))

    assert result.coverage.matched == 4
    assert result.coverage.total == 5
    assert result.quantitative == 3
    assert result.value == 3


def test_classify_capped_one_level_below(catalog):
    po1 = catalog.outcomes["PO1"]
    assert classify(2, po1, match("alpha bravo charlie echo", po1)).value == 2
    assert classify(1, po1, match("alpha bravo charlie echo", po1)).value == 1


def test_classify_medium_band(catalog):
    po1 = catalog.outcomes["PO1"]
    assert classify(3, po1, match("alpha bravo", po1)).value == 2
    assert classify(3, po1, match("alpha bravo charlie", po1)).value == 2


def test_classify_empty_match_set(catalog):
    result = classify(3, catalog.outcomes["PO1"], ())
    assert result.value is None


def test_duplicate_pis_counted_once(catalog):
    po1 = catalog.outcomes["PO1"]
    # "alpha alpha" hits 1.1.1 once
    result = classify(3, po1, match("alpha alpha", po1))
    assert result.coverage.matched_pis == ("1.1.1",)
    assert result.value == 1
