"""Services for plan generation."""

from .plan_generation import PlanGenerationService

__all__ = ["PlanGenerationService"]
