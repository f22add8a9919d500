"""Pydantic models for API responses.

The generation endpoint returns the provider's JSON verbatim, so these
models describe the expected shape rather than enforce it. Every field
has an empty default so a partially filled plan still renders.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """Treat explicit nulls as missing so the field default applies."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class SceneResponse(_CamelModel):
    """A single storyboard beat of the short."""

    beat: str = ""
    timing: str = ""  # e.g. "0-5s"
    narration: str = ""
    visuals: str = ""
    sound_design: str = ""


class PlanMetadataResponse(_CamelModel):
    """Publishing metadata bundle."""

    description: str = ""
    hashtags: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    publishing_tip: str = ""


class GeneratedPlanResponse(_CamelModel):
    """Full production plan for one short."""

    headline: str = ""
    hook: str = ""
    storyline: list[SceneResponse] = Field(default_factory=list)
    script: str = ""
    educational_moments: list[str] = Field(default_factory=list)
    call_to_action: str = ""
    safety_checklist: list[str] = Field(default_factory=list)
    metadata: PlanMetadataResponse = Field(default_factory=PlanMetadataResponse)
    thumbnail_concepts: list[str] = Field(default_factory=list)
    repurposing_ideas: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Body returned on every failure path."""

    error: str
