from app.mapping.levels import describe_level, parse_cognitive_level
from app.mapping.matcher import extract_keywords, match

import pytest


def test_extract_keywords_strips_punctuation_and_short_tokens():
    assert extract_keywords("Apply (data) structures, and OK... trees!") == ("apply", "data", "structures", "trees")


def test_extract_keywords_dedupes_in_order():
    assert extract_keywords("Graph graph GRAPH theory") == ("graph", "theory")


def test_match_pi_keywords(catalog):
    result = match("Students use alpha and echo methods", catalog.outcomes["PO1"])

    assert [m.competency_id for m in result] == ["1.1", "1.2"]
    assert [pi.pi_id for pi in result[0].matched_pis] == ["1.1.1"]
    assert [pi.pi_id for pi in result[1].matched_pis] == ["1.2.1"]


def test_competency_only_match_uses_first_pi(catalog):
    result = match("Understand the zebra model", catalog.outcomes["PO1"])

    assert len(result) == 1
    assert result[0].competency_id == "1.1"
    assert [pi.pi_id for pi in result[0].matched_pis] == ["1.1.1"]


def test_substring_match_is_case_insensitive(catalog):
    result = match("ALPHABET soup", catalog.outcomes["PO1"])
    assert [pi.pi_id for pi in result[0].matched_pis] == ["1.1.1"]


def test_no_match_and_blank_text(catalog):
    assert match("nothing relevant here", catalog.outcomes["PO1"]) == ()
    assert match("   ", catalog.outcomes["PO1"]) == ()


@pytest.mark.parametrize("raw,expected", [(3, 3), ("4", 4), ("k5", 5), (" K1 ", 1)])
def test_parse_cognitive_level(raw, expected):
    assert parse_cognitive_level(raw) == expected


@pytest.mark.parametrize("raw", [0, 7, "K", "three", True, None])
def test_parse_cognitive_level_rejects(raw):
    with pytest.raises(ValueError):
        parse_cognitive_level(raw)


def test_describe_level():
    assert describe_level(4) == "K4 (Analyze)"
