# app/llm/prompts/registry.py

from dataclasses import dataclass

from app.llm.prompts import templates

@dataclass(frozen=True)
class PromptTemplate:
    name: str
    version: str
    template: str

PROMPTS: dict[tuple[str, str], PromptTemplate] = {
    ("justify_mapping", "v1"): PromptTemplate("justify_mapping", "v1", templates.JUSTIFY_MAPPING_V1),
    ("healthcheck", "v1"): PromptTemplate("healthcheck", "v1", templates.HEALTHCHECK_V1),
}

def get_prompt(name: str, version: str) -> PromptTemplate:
    key = (name, version)
    if key not in PROMPTS:
        raise KeyError(f"Unknown prompt: {name}@{version}")
    return PROMPTS[key]
