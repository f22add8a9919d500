"""Shared enums for API models."""

from enum import Enum


class AgeGroup(str, Enum):
    """Target age bracket for a short."""

    AGES_3_5 = "Ages 3-5"
    AGES_5_8 = "Ages 5-8"
    AGES_7_10 = "Ages 7-10"
    AGES_9_12 = "Ages 9-12"


class TonePreset(str, Enum):
    """Narrative tone presets offered by the brief form."""

    PLAYFUL = "Playful & Silly"
    CURIOUS = "Curious Explorer"
    SUPERHERO = "Superhero Mentor"
    CALM = "Calm Storyteller"


class CadencePreset(str, Enum):
    """Publishing cadence presets."""

    DAILY = "Daily"
    THREE_PER_WEEK = "3 videos / week"
    WEEKLY = "Weekly"
