from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Optional

from app.mapping.levels import parse_cognitive_level
from app.mapping.types import CourseOutcome, Justification, MatrixResult
from app.schemas.syllabus_schema import SyllabusData


class CourseOutcomeIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1, max_length=32)
    description: str = Field(min_length=1)
    cognitive_level: int = Field(
        validation_alias=AliasChoices("cognitiveLevel", "kLevel", "cognitive_level"),
    )

    @field_validator("id", "description")
    @classmethod
    def _strip(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("cognitive_level", mode="before")
    @classmethod
    def _coerce_level(cls, v):
        return parse_cognitive_level(v)

    def to_domain(self) -> CourseOutcome:
        return CourseOutcome(id=self.id, description=self.description, cognitive_level=self.cognitive_level)


class MatrixRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    course_name: str = Field(min_length=1, validation_alias=AliasChoices("courseName", "course_name"))
    course_code: str = Field(min_length=1, validation_alias=AliasChoices("courseCode", "course_code"))
    course_outcomes: List[CourseOutcomeIn] = Field(
        min_length=1,
        validation_alias=AliasChoices("courseOutcomes", "course_outcomes"),
    )
    syllabus_data: Optional[SyllabusData] = Field(
        default=None,
        validation_alias=AliasChoices("syllabusData", "syllabus_data", "syllabus"),
    )


class QuantitativeOut(BaseModel):
    matched: int
    total: int
    percent: float
    value: int
    strength: str
    matched_pis: List[str]
    all_pis: List[str]


class QualitativeOut(BaseModel):
    matched_pis: List[str]


class JustificationOut(BaseModel):
    alignment_statement: str
    quantitative: Optional[QuantitativeOut] = None
    qualitative: Optional[QualitativeOut] = None
    enriched: bool = False
    syllabus_unit: Optional[str] = None

    @classmethod
    def from_domain(cls, j: Justification) -> "JustificationOut":
        q = j.quantitative
        return cls(
            alignment_statement=j.alignment_statement,
            quantitative=QuantitativeOut(
                matched=q.matched,
                total=q.total,
                percent=round(q.percent, 1),
                value=q.value,
                strength=q.strength,
                matched_pis=list(q.matched_pis),
                all_pis=list(q.all_pis),
            ) if q is not None else None,
            qualitative=QualitativeOut(matched_pis=list(j.qualitative.matched_pis)) if j.qualitative else None,
            enriched=j.enriched,
            syllabus_unit=j.syllabus_unit,
        )


class MatrixResponse(BaseModel):
    matrix: Dict[str, Dict[str, Optional[int]]]
    reasoning: Dict[str, Dict[str, Optional[str]]]
    justifications: Dict[str, Dict[str, Optional[JustificationOut]]] = Field(default_factory=dict)
    po_ids: List[str] = Field(validation_alias=AliasChoices("poIds", "po_ids", "poNumbers"))
    pso_ids: List[str] = Field(validation_alias=AliasChoices("psoIds", "pso_ids", "psoNumbers"))
    averages: Dict[str, Optional[float]] = Field(default_factory=dict)

    @classmethod
    def from_result(cls, result: MatrixResult) -> "MatrixResponse":
        return cls(
            matrix=result.matrix,
            reasoning=result.reasoning,
            justifications={
                co_id: {oid: (JustificationOut.from_domain(j) if j is not None else None) for oid, j in row.items()}
                for co_id, row in result.justifications.items()
            },
            po_ids=result.po_ids,
            pso_ids=result.pso_ids,
            averages=result.averages,
        )


class DocxExportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    matrix_result: MatrixResponse = Field(validation_alias=AliasChoices("matrixResult", "matrix_result"))
    course_name: str = Field(min_length=1, validation_alias=AliasChoices("courseName", "course_name"))
    course_code: str = Field(min_length=1, validation_alias=AliasChoices("courseCode", "course_code"))
