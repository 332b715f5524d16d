import asyncio

from app.mapping.matcher import match
from app.mapping.reasoning import ReasoningSynthesizer, template_statement
from app.mapping.types import CompetencyMatch
from app.schemas.syllabus_schema import SyllabusData, SyllabusUnit


class FixedEnricher:
    def __init__(self, text=None, exc=None):
        self.text = text
        self.exc = exc
        self.calls = 0

    async def justify(self, co, outcome, correlation_value, match_set, syllabus=None, top_unit=None):
        self.calls += 1
        if self.exc:
            raise self.exc
        return self.text


def test_template_statement(make_co):
    text = template_statement(make_co("CO2", "x"), "PO1", "Demonstrate Competence", ["1.1.1", "1.2.1"])
    assert text == "CO 2 aligned with PO1 based on demonstrate competence addressing PIs 1.1.1, 1.2.1."


def test_synthesize_builds_all_segments(catalog, make_co):
    po1 = catalog.outcomes["PO1"]
    course_outcome = make_co("CO1", "echo then alpha and bravo")
    match_set = match(course_outcome.description, po1)

    j = asyncio.run(ReasoningSynthesizer().synthesize(course_outcome, po1, 2, match_set))

    assert j.alignment_statement == "CO 1 aligned with PO1 based on zebra addressing PIs 1.1.1, 1.1.2, 1.2.1."
    assert j.enriched is False
    assert j.quantitative.matched == 3
    assert j.quantitative.total == 5
    assert j.quantitative.percent == 60.0
    assert j.quantitative.strength == "Medium"
    assert j.qualitative.matched_pis == ("1.1.1", "1.1.2", "1.2.1")

    text = j.to_text()
    assert "(Ratio: 3/5 = 60.0% coverage)" in text
    assert "mapping strength of 2 (Medium)" in text
    assert text.endswith("Qualitative: CO aligns with the following Performance Indicators (PIs) of PO1: 1.1.1, 1.1.2, 1.2.1.")


def test_enriched_statement_replaces_template(catalog, make_co):
    po1 = catalog.outcomes["PO1"]
    course_outcome = make_co("CO1", "alpha")
    enricher = FixedEnricher(text="CO 1 aligned with PO1 based on zebra (1.1.1)")

    j = asyncio.run(ReasoningSynthesizer(enricher).synthesize(course_outcome, po1, 1, match("alpha", po1)))

    assert enricher.calls == 1
    assert j.enriched is True
    assert j.alignment_statement == "CO 1 aligned with PO1 based on zebra (1.1.1)"
    assert j.quantitative is not None


def test_enricher_failure_falls_back_to_template(catalog, make_co):
    po1 = catalog.outcomes["PO1"]
    course_outcome = make_co("CO1", "alpha")
    synth = ReasoningSynthesizer(FixedEnricher(exc=RuntimeError("boom")))

    j = asyncio.run(synth.synthesize(course_outcome, po1, 1, match("alpha", po1)))

    assert j.enriched is False
    assert j.alignment_statement.startswith("CO 1 aligned with PO1")


def test_empty_enrichment_falls_back_to_template(catalog, make_co):
    po1 = catalog.outcomes["PO1"]
    synth = ReasoningSynthesizer(FixedEnricher(text="   "))

    j = asyncio.run(synth.synthesize(make_co("CO1", "alpha"), po1, 1, match("alpha", po1)))
    assert j.enriched is False


def test_enrichment_timeout_falls_back(catalog, make_co):
    class SlowEnricher:
        async def justify(self, *args, **kwargs):
            await asyncio.sleep(5)
            return "too late"

    po1 = catalog.outcomes["PO1"]
    synth = ReasoningSynthesizer(SlowEnricher(), enrichment_timeout_seconds=0.01)

    j = asyncio.run(synth.synthesize(make_co("CO1", "alpha"), po1, 1, match("alpha", po1)))
    assert j.enriched is False


def test_primary_without_pis_yields_nothing(catalog, make_co):
    po1 = catalog.outcomes["PO1"]
    match_set = (CompetencyMatch(competency_id="1.1", competency_description="zebra", matched_pis=()),)

    j = asyncio.run(ReasoningSynthesizer().synthesize(make_co("CO1", "zebra"), po1, 1, match_set))
    assert j is None


def test_syllabus_unit_is_cited(catalog, make_co):
    po1 = catalog.outcomes["PO1"]
    syllabus = SyllabusData(
        units=[
            SyllabusUnit(number="1", title="Basics", content="intro"),
            SyllabusUnit(number="2", title="Alpha methods", content="alpha alpha"),
        ]
    )

    j = asyncio.run(
        ReasoningSynthesizer().synthesize(make_co("CO1", "alpha"), po1, 1, match("alpha", po1), syllabus)
    )

    assert j.syllabus_unit == "2"
    assert j.alignment_statement.endswith("as covered in Unit 2.")
