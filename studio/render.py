"""
Plain-text rendering of briefs and generated plans.

The same formatted sections feed the terminal output and the clipboard
copy actions, so a copied section reads exactly like what was shown.
"""

from typing import Sequence

from backend.api.models.enums import CadencePreset, TonePreset
from backend.api.models.responses import GeneratedPlanResponse, SceneResponse
from backend.core.prompts import clamp_runtime

TONE_EMOJIS = {
    TonePreset.PLAYFUL: "🎉",
    TonePreset.CURIOUS: "🧭",
    TonePreset.SUPERHERO: "🦸",
    TonePreset.CALM: "🌙",
}

CADENCE_COPY = {
    CadencePreset.DAILY: "🚀 Daily Drops",
    CadencePreset.THREE_PER_WEEK: "🌟 Steady Growth",
    CadencePreset.WEEKLY: "🌈 Quality Weekly",
}

EMPTY_PREVIEW_TEXT = (
    "Your first three scenes will appear here after generation. "
    "Perfect to sanity check the pacing at a glance."
)


def format_seconds(seconds: int) -> str:
    """Runtime label, clamped the same way the prompt clamps it."""
    return f"{clamp_runtime(seconds)}s"


def creativity_label(creativity: float) -> str:
    if creativity >= 0.7:
        return "Wild & whimsical"
    if creativity <= 0.4:
        return "Safe & structured"
    return "Balanced storytelling"


def tone_label(tone: TonePreset) -> str:
    return f"{TONE_EMOJIS[tone]} {tone.value}"


def format_beats(plan: GeneratedPlanResponse) -> str:
    """Storyboard beats in copyable form."""
    return "\n\n".join(
        f"{index}. [{scene.timing}] {scene.beat}\n"
        f"Narration: {scene.narration}\n"
        f"Visuals: {scene.visuals}\n"
        f"Sound design: {scene.sound_design}"
        for index, scene in enumerate(plan.storyline, start=1)
    )


def format_metadata(plan: GeneratedPlanResponse) -> str:
    """Metadata bundle in copyable form."""
    metadata = plan.metadata
    return "\n".join([
        metadata.description,
        "",
        f"Hashtags: {' '.join(metadata.hashtags)}",
        f"Keywords: {', '.join(metadata.keywords)}",
        f"Publishing tip: {metadata.publishing_tip}",
    ])


def format_script(plan: GeneratedPlanResponse) -> str:
    return plan.script


# Sections that can be copied to the clipboard
COPY_SECTIONS = {
    "beats": format_beats,
    "script": format_script,
    "metadata": format_metadata,
}


def render_preview(plan: GeneratedPlanResponse | None, scenes: Sequence[SceneResponse]) -> str:
    """The quick preview panel: headline, hook and the first scenes."""
    if plan is None:
        return f"Quick preview\n{EMPTY_PREVIEW_TEXT}"

    lines = ["Quick preview", f"[{plan.headline}]", plan.hook]
    for scene in scenes:
        lines.append(f"  {scene.timing}  {scene.beat}: {scene.narration}")
    return "\n".join(lines)


def _bullets(items: Sequence[str], marker: str = "-") -> list[str]:
    return [f"{marker} {item}" for item in items]


def render_plan(plan: GeneratedPlanResponse) -> str:
    """Full plan as terminal-friendly text, one section per card."""
    lines = [plan.headline, plan.hook, ""]

    lines.append("== Storyboard & beats ==")
    for index, scene in enumerate(plan.storyline, start=1):
        lines.extend([
            f"{index:02d} {scene.beat} ({scene.timing})",
            f"   Voiceover: {scene.narration}",
            f"   Visuals: {scene.visuals}",
            f"   Sound design: {scene.sound_design}",
        ])
    lines.append("")

    lines.extend(["== Editable script ==", plan.script, ""])

    lines.append("== Educational beats ==")
    lines.extend(_bullets(plan.educational_moments))
    lines.append("")

    lines.append("== Safety & delivery ==")
    lines.extend(_bullets(plan.safety_checklist, marker="[x]"))
    lines.extend([f"CTA: {plan.call_to_action}", ""])

    lines.extend(["== Metadata bundle ==", format_metadata(plan), ""])

    lines.append("== Thumbnail sparks ==")
    lines.extend(f"{index}. {concept}" for index, concept in enumerate(plan.thumbnail_concepts, start=1))
    lines.append("")

    lines.append("== Repurposing fuel ==")
    lines.extend(_bullets(plan.repurposing_ideas))

    return "\n".join(lines)
