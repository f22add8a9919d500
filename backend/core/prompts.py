"""
Prompt construction for the kids shorts creative director.

The system prompt is fixed; the user prompt interpolates the brief into
plain English lines, one per field.
"""

import json
import math
from typing import Optional, TYPE_CHECKING

from backend.config.brief import (
    BRIEF_CONSTANTS,
    FALLBACK_CHANNEL_NAME,
    FALLBACK_EXTRA_NOTES,
    FALLBACK_HERO_CHARACTER,
    FALLBACK_LEARNING_OUTCOME,
)

if TYPE_CHECKING:
    from backend.api.models.requests import BriefRequest


SYSTEM_PROMPT = """You are Kid Shorts Studio, an elite creative director for YouTube Kids shorts.

Guidelines:
- Content must be COPPA friendly, inclusive, kind, and safe for children.
- Match the requested tone while staying upbeat, empathetic, and imaginative.
- Deliver actionable production notes for a 9:16 short from hook to CTA.
- Include quick educational beats that reinforce positive learning.
- Provide captions, visuals, sound design suggestions, and editing beats appropriate for high retention.
- Output MUST be valid JSON that matches the schema below. Never include markdown fences or commentary.

Schema:
{
  "headline": string,
  "hook": string,
  "storyline": [
    {
      "beat": string,
      "timing": string,
      "narration": string,
      "visuals": string,
      "soundDesign": string
    }
  ],
  "script": string,
  "educationalMoments": string[],
  "callToAction": string,
  "safetyChecklist": string[],
  "metadata": {
    "description": string,
    "hashtags": string[],
    "keywords": string[],
    "publishingTip": string
  },
  "thumbnailConcepts": string[],
  "repurposingIdeas": string[]
}

Ensure narrator lines are fun to perform. Offer fresh thumbnail ideas with clear focal points and expressive characters."""


# Used when the provider answers without any completion text
EMPTY_PLAN_JSON = json.dumps(
    {
        "headline": "Creative output unavailable",
        "hook": "",
        "storyline": [],
        "script": "",
        "educationalMoments": [],
        "callToAction": "",
        "safetyChecklist": [],
        "metadata": {
            "description": "",
            "hashtags": [],
            "keywords": [],
            "publishingTip": "",
        },
        "thumbnailConcepts": [],
        "repurposingIdeas": [],
    },
    separators=(",", ":"),
)


def clamp_runtime(seconds: int) -> int:
    """Clamp a runtime into the supported Shorts window."""
    return max(
        BRIEF_CONSTANTS["runtime_min_seconds"],
        min(BRIEF_CONSTANTS["runtime_max_seconds"], seconds),
    )


def derive_temperature(creativity: Optional[float]) -> float:
    """Map the creativity slider (0-1) onto a provider temperature.

    Missing, non-finite or out-of-range values use the default creativity,
    which lands on a temperature of 0.8.
    """
    if creativity is None or not math.isfinite(creativity) or not 0.0 <= creativity <= 1.0:
        creativity = BRIEF_CONSTANTS["default_creativity"]

    temperature = creativity + BRIEF_CONSTANTS["temperature_offset"]
    temperature = max(BRIEF_CONSTANTS["temperature_min"], min(BRIEF_CONSTANTS["temperature_max"], temperature))
    # 0.6 + 0.2 is 0.7999999999999999 in binary floating point
    return round(temperature, 4)


def build_user_prompt(brief: "BriefRequest") -> str:
    """Render the brief as the user message for the provider."""
    return "\n".join([
        f"Channel name: {brief.channel_name or FALLBACK_CHANNEL_NAME}",
        f"Short concept: {brief.topic}",
        f"Target age group: {brief.target_age.value}",
        f"Desired learning outcome: {brief.learning_outcome or FALLBACK_LEARNING_OUTCOME}",
        f"Tone: {brief.tone.value}",
        f"Hero or host: {brief.hero_character or FALLBACK_HERO_CHARACTER}",
        f"Ideal runtime: {clamp_runtime(brief.runtime_seconds)} seconds",
        f"Publishing cadence: {brief.cadence.value}",
        f"Call to action requested: {brief.call_to_action}",
        f"Extra notes / constraints: {brief.extra_notes or FALLBACK_EXTRA_NOTES}",
    ])
