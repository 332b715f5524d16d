from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Optional

from app.mapping.levels import parse_cognitive_level


class CompetencyEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    description: str
    performance_indicators: Dict[str, str] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("performanceIndicators", "performance_indicators"),
        serialization_alias="performanceIndicators",
    )


class OutcomeEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: Optional[str] = None
    cognitive_level: int = Field(
        validation_alias=AliasChoices("cognitiveLevel", "kLevel", "cognitive_level"),
        serialization_alias="cognitiveLevel",
    )
    competencies: Dict[str, CompetencyEntry] = Field(default_factory=dict)

    @field_validator("cognitive_level", mode="before")
    @classmethod
    def _coerce_level(cls, v):
        return parse_cognitive_level(v)
