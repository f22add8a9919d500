"""Pydantic models for API requests and responses."""

from .enums import AgeGroup, TonePreset, CadencePreset
from .requests import BriefRequest
from .responses import (
    GeneratedPlanResponse,
    SceneResponse,
    PlanMetadataResponse,
    ErrorResponse,
)

__all__ = [
    "AgeGroup",
    "TonePreset",
    "CadencePreset",
    "BriefRequest",
    "GeneratedPlanResponse",
    "SceneResponse",
    "PlanMetadataResponse",
    "ErrorResponse",
]
