"""
Creative brief constants for Kid Shorts Studio.

Shorts retention sweet spots and the temperature window the creativity
slider maps onto.
"""

BRIEF_CONSTANTS = {
    "runtime_min_seconds": 15,
    "runtime_max_seconds": 90,  # YouTube Shorts hard limit is higher, retention drops past 90s
    "default_runtime_seconds": 45,
    "default_creativity": 0.6,
    "temperature_offset": 0.2,  # creativity 0.0 still gets a little variety
    "temperature_min": 0.2,
    "temperature_max": 0.95,
}

DEFAULT_CALL_TO_ACTION = "Subscribe for more adventures!"

# Substituted into the user prompt when the brief leaves a field empty
FALLBACK_CHANNEL_NAME = "Not provided"
FALLBACK_LEARNING_OUTCOME = "Create an age-appropriate takeaway."
FALLBACK_HERO_CHARACTER = "Create an original, friendly character."
FALLBACK_EXTRA_NOTES = "Stay joyful, ethical, and child-safe."
