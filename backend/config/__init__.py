"""
Configuration module for Kid Shorts Studio.

Re-exports all configuration for convenient access.
"""

from .llm import (
    LLM_TIMEOUT,
    DEFAULT_MODEL,
    get_provider_api_key,
    get_model_name,
    get_provider_base_url,
)
from .brief import (
    BRIEF_CONSTANTS,
    DEFAULT_CALL_TO_ACTION,
    FALLBACK_CHANNEL_NAME,
    FALLBACK_LEARNING_OUTCOME,
    FALLBACK_HERO_CHARACTER,
    FALLBACK_EXTRA_NOTES,
)

__all__ = [
    # LLM
    "LLM_TIMEOUT",
    "DEFAULT_MODEL",
    "get_provider_api_key",
    "get_model_name",
    "get_provider_base_url",
    # Brief
    "BRIEF_CONSTANTS",
    "DEFAULT_CALL_TO_ACTION",
    "FALLBACK_CHANNEL_NAME",
    "FALLBACK_LEARNING_OUTCOME",
    "FALLBACK_HERO_CHARACTER",
    "FALLBACK_EXTRA_NOTES",
]
