"""
Lenient JSON parsing for provider completions.

Models asked for JSON still occasionally wrap it in markdown code fences.
Parsing is tried once as-is, then once more with the fence markers removed.
Only strict JSON is accepted: the NaN/Infinity literals Python's decoder
allows are rejected, and numbers too large for a float decode as null.
"""

import json
import math
import re
from typing import Any

from .errors import PlanFormatError

_FENCE_PATTERN = re.compile(r"```json|```")


def strip_code_fences(text: str) -> str:
    """Remove literal ```json / ``` markers and surrounding whitespace."""
    return _FENCE_PATTERN.sub("", text).strip()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _parse_float(value: str) -> Any:
    number = float(value)
    return number if math.isfinite(number) else None


def _loads(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant, parse_float=_parse_float)


def parse_plan_text(text: str) -> Any:
    """Parse completion text as JSON.

    Raises:
        PlanFormatError: if the text is not JSON even after fence stripping
    """
    try:
        return _loads(text)
    except (ValueError, RecursionError):
        pass

    cleaned = strip_code_fences(text)
    try:
        return _loads(cleaned)
    except (ValueError, RecursionError) as e:
        raise PlanFormatError(f"Completion is not valid JSON: {e}", content=text) from e
