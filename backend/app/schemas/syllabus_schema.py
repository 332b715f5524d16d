from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional


class SyllabusUnit(BaseModel):
    number: str
    title: str
    content: str = ""

    @field_validator("number", mode="before")
    @classmethod
    def _number_as_text(cls, v):
        return str(v).strip() if v is not None else ""


class SyllabusData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    units: List[SyllabusUnit] = Field(default_factory=list)
    full_text: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("fullText", "full_text"),
    )
    summary: Optional[str] = None


class SyllabusUploadResponse(BaseModel):
    success: bool = True
    syllabus_data: SyllabusData
