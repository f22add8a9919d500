"""Pydantic models for API requests."""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ...config.brief import BRIEF_CONSTANTS, DEFAULT_CALL_TO_ACTION
from .enums import AgeGroup, CadencePreset, TonePreset


class BriefRequest(BaseModel):
    """Creative brief for one kids short.

    Wire format uses camelCase keys (``channelName``, ``runtimeSeconds``...).
    Every field has a default so a partial brief is still accepted.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    channel_name: str = Field(default="", examples=["WonderKids Explorers"])
    topic: str = Field(default="", examples=["Why do chameleons change colors?"])
    target_age: AgeGroup = AgeGroup.AGES_5_8
    learning_outcome: str = Field(
        default="", examples=["Teach kids how camouflage works in nature."]
    )
    tone: TonePreset = TonePreset.PLAYFUL
    hero_character: str = Field(default="", examples=["Sunny the Science Gecko"])
    runtime_seconds: int = Field(
        default=BRIEF_CONSTANTS["default_runtime_seconds"],
        description="Target runtime; clamped to 15-90 seconds when used",
    )
    call_to_action: str = DEFAULT_CALL_TO_ACTION
    cadence: CadencePreset = CadencePreset.THREE_PER_WEEK
    extra_notes: str = ""
    creativity: Optional[float] = Field(
        default=BRIEF_CONSTANTS["default_creativity"],
        description="0.0 (safe) to 1.0 (wild); anything else falls back to the default",
    )

    @field_validator("creativity", mode="before")
    @classmethod
    def coerce_creativity(cls, value):
        """Treat anything that is not a number as a missing creativity value."""
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                return None
        return None

    def to_payload(self) -> dict:
        """Serialize to the camelCase JSON body the endpoint expects."""
        payload = self.model_dump(mode="json", by_alias=True)
        # JSON has no NaN/Infinity; send null and let the server default it
        creativity = self.creativity
        if creativity is not None and not math.isfinite(creativity):
            payload["creativity"] = None
        return payload
