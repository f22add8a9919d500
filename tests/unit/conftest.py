"""Pytest fixtures for API and client tests."""

import copy
import json
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from backend.api.main import app
from backend.api.dependencies import get_completion_provider
from backend.core.provider import CompletionProvider


SAMPLE_PLAN = {
    "headline": "Chameleon Color Magic!",
    "hook": "What if you could change colors like a rainbow?",
    "storyline": [
        {
            "beat": "Hook",
            "timing": "0-5s",
            "narration": "Whoa! Did that lizard just turn green?",
            "visuals": "Close-up of Sunny the gecko blinking",
            "soundDesign": "Playful boing",
        },
        {
            "beat": "Question",
            "timing": "5-15s",
            "narration": "Chameleons change color to talk to friends!",
            "visuals": "Two chameleons waving",
            "soundDesign": "Soft marimba",
        },
        {
            "beat": "Science",
            "timing": "15-30s",
            "narration": "Tiny crystals in their skin bounce light around.",
            "visuals": "Animated crystals sparkling",
            "soundDesign": "Twinkle chimes",
        },
        {
            "beat": "CTA",
            "timing": "30-45s",
            "narration": "Subscribe for more adventures!",
            "visuals": "Sunny waving goodbye",
            "soundDesign": "Upbeat jingle",
        },
    ],
    "script": "SUNNY: Whoa! Did that lizard just turn green?",
    "educationalMoments": ["Chameleons use color to communicate"],
    "callToAction": "Subscribe for more adventures!",
    "safetyChecklist": ["No scary imagery", "No personal data requests"],
    "metadata": {
        "description": "Learn why chameleons change colors!",
        "hashtags": ["#KidsScience", "#Shorts"],
        "keywords": ["chameleon", "camouflage"],
        "publishingTip": "Post after school hours",
    },
    "thumbnailConcepts": ["Rainbow chameleon with wide eyes"],
    "repurposingIdeas": ["Turn the crystals beat into a coloring page"],
}


class FakeProvider(CompletionProvider):
    """Records calls and returns canned completion text."""

    model = "fake-model"

    def __init__(self, content: Optional[str] = None, error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.calls = []

    async def complete(self, system_prompt, user_prompt, temperature):
        self.calls.append(
            {"system_prompt": system_prompt, "user_prompt": user_prompt, "temperature": temperature}
        )
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture
def sample_plan():
    """A fresh copy of a well-formed plan."""
    return copy.deepcopy(SAMPLE_PLAN)


@pytest.fixture
def fake_provider(sample_plan):
    """Provider that answers with the sample plan."""
    return FakeProvider(content=json.dumps(sample_plan))


@pytest.fixture
def client_with_provider(fake_provider):
    """TestClient with the completion provider replaced by a fake."""
    app.dependency_overrides[get_completion_provider] = lambda: fake_provider

    with TestClient(app) as client:
        yield client, fake_provider

    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """TestClient with real dependencies."""
    with TestClient(app) as client:
        yield client
