#!/usr/bin/env python3
"""
CLI for planning a kids short from a creative brief.

Talks to a running Kid Shorts Studio API (see scripts/run_api.py).

Usage:
    python cli/generate_short.py "Why do chameleons change colors?"
    python cli/generate_short.py "Volcanoes" --age "Ages 7-10" --tone "Curious Explorer"
    python cli/generate_short.py "Sharing toys" --copy script
    python cli/generate_short.py "Rainbows" --json  # raw plan JSON
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from backend.api.models.enums import AgeGroup, CadencePreset, TonePreset
from backend.config.brief import BRIEF_CONSTANTS, DEFAULT_CALL_TO_ACTION
from studio.api_client import DEFAULT_ENDPOINT, GenerationClient
from studio.form import BriefForm
from studio.render import (
    COPY_SECTIONS,
    CADENCE_COPY,
    creativity_label,
    format_seconds,
    render_plan,
    render_preview,
    tone_label,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a kid-safe YouTube Shorts plan from a creative brief",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python cli/generate_short.py "Why do chameleons change colors?" --channel "WonderKids Explorers"
    python cli/generate_short.py "Volcanoes" --hero "Sunny the Science Gecko" --runtime 60
    python cli/generate_short.py "Bedtime stars" --tone "Calm Storyteller" --creativity 0.3
        """,
    )

    parser.add_argument("topic", type=str, help="The short idea")
    parser.add_argument("--channel", default="", help="Channel name")
    parser.add_argument(
        "--age",
        choices=[age.value for age in AgeGroup],
        default=AgeGroup.AGES_5_8.value,
        help="Target age group (default: Ages 5-8)",
    )
    parser.add_argument("--learning", default="", help="Learning takeaway")
    parser.add_argument(
        "--tone",
        choices=[tone.value for tone in TonePreset],
        default=TonePreset.PLAYFUL.value,
        help="Tone preset (default: Playful & Silly)",
    )
    parser.add_argument("--hero", default="", help="Hero or host character")
    parser.add_argument(
        "--runtime",
        type=int,
        default=BRIEF_CONSTANTS["default_runtime_seconds"],
        help="Runtime focus in seconds, 15-90 (default: 45)",
    )
    parser.add_argument("--cta", default=DEFAULT_CALL_TO_ACTION, help="Call to action")
    parser.add_argument(
        "--cadence",
        choices=[cadence.value for cadence in CadencePreset],
        default=CadencePreset.THREE_PER_WEEK.value,
        help="Channel cadence (default: 3 videos / week)",
    )
    parser.add_argument("--notes", default="", help="Must-have notes")
    parser.add_argument(
        "--creativity",
        type=float,
        default=BRIEF_CONSTANTS["default_creativity"],
        help="Creative energy from 0.0 (mild) to 1.0 (magic), default 0.6",
    )
    parser.add_argument(
        "--endpoint",
        default=DEFAULT_ENDPOINT,
        help=f"Kid Shorts Studio API base URL (default: {DEFAULT_ENDPOINT})",
    )
    parser.add_argument(
        "--copy",
        choices=list(COPY_SECTIONS),
        default=None,
        help="Copy a section of the plan to the clipboard",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the plan as JSON instead of formatted text",
    )

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    client = GenerationClient(base_url=args.endpoint)
    form = BriefForm(client)
    form.update(
        channel_name=args.channel,
        topic=args.topic,
        target_age=args.age,
        learning_outcome=args.learning,
        tone=args.tone,
        hero_character=args.hero,
        runtime_seconds=args.runtime,
        call_to_action=args.cta,
        cadence=args.cadence,
        extra_notes=args.notes,
        creativity=args.creativity,
    )

    brief = form.brief
    print(
        f"Crafting your short... {tone_label(brief.tone)} | {format_seconds(brief.runtime_seconds)} target | "
        f"{CADENCE_COPY[brief.cadence]} | {creativity_label(args.creativity)}",
        file=sys.stderr,
    )

    try:
        plan = form.submit()
    finally:
        client.close()

    if plan is None:
        print(form.error_message, file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(plan.model_dump(by_alias=True), indent=2, ensure_ascii=False))
    else:
        print(render_preview(plan, form.scene_preview))
        print()
        print(render_plan(plan))

    if args.copy:
        if form.copy_section(args.copy):
            print(form.notice, file=sys.stderr)
        else:
            print("Clipboard unavailable; nothing copied.", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
