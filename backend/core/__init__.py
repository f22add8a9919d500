# Kid Shorts Studio - Core Domain

# Re-export the generation building blocks for convenient access
from .errors import (
    GenerationError,
    MissingCredentialError,
    ProviderError,
    PlanFormatError,
)
from .prompts import (
    SYSTEM_PROMPT,
    EMPTY_PLAN_JSON,
    build_user_prompt,
    clamp_runtime,
    derive_temperature,
)
from .plan_parser import parse_plan_text, strip_code_fences
from .provider import CompletionProvider, OpenAIChatProvider

__all__ = [
    "GenerationError",
    "MissingCredentialError",
    "ProviderError",
    "PlanFormatError",
    "SYSTEM_PROMPT",
    "EMPTY_PLAN_JSON",
    "build_user_prompt",
    "clamp_runtime",
    "derive_temperature",
    "parse_plan_text",
    "strip_code_fences",
    "CompletionProvider",
    "OpenAIChatProvider",
]
