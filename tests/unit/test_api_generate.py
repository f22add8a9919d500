"""Tests for POST /api/generate."""

import json

import httpx
import pytest
from unittest.mock import MagicMock, patch

from backend.api.config import GENERATE_PATH
from backend.api.dependencies import get_completion_provider
from backend.api.main import app
from backend.core.errors import ProviderError
from backend.core.provider import OpenAIChatProvider


MISSING_KEY_MESSAGE = "Missing OPENAI_API_KEY. Add it to your environment before generating content."
PROVIDER_FAILED_MESSAGE = "The model could not generate a short. Please try again."
FORMAT_FAILED_MESSAGE = "Generation succeeded but the response formatting failed. Try running again."

BRIEF = {
    "channelName": "WonderKids Explorers",
    "topic": "Why do chameleons change colors?",
    "targetAge": "Ages 5-8",
    "learningOutcome": "",
    "tone": "Playful & Silly",
    "heroCharacter": "",
    "runtimeSeconds": 45,
    "callToAction": "Subscribe for more adventures!",
    "cadence": "3 videos / week",
    "extraNotes": "",
    "creativity": 0.6,
}


class TestGenerateSuccess:
    """Successful generations return the provider's JSON verbatim."""

    def test_returns_parsed_plan(self, client_with_provider, sample_plan):
        client, provider = client_with_provider

        response = client.post("/api/generate", json=BRIEF)

        assert response.status_code == 200
        assert response.json() == sample_plan
        assert len(provider.calls) == 1

    def test_served_at_shared_generate_path(self, client_with_provider):
        client, provider = client_with_provider

        assert GENERATE_PATH == "/api/generate"
        assert client.post(GENERATE_PATH, json=BRIEF).status_code == 200

    def test_sends_system_and_user_prompt(self, client_with_provider):
        client, provider = client_with_provider

        client.post("/api/generate", json=BRIEF)

        call = provider.calls[0]
        assert "Kid Shorts Studio" in call["system_prompt"]
        assert "Short concept: Why do chameleons change colors?" in call["user_prompt"]
        assert "Hero or host: Create an original, friendly character." in call["user_prompt"]
        assert call["temperature"] == pytest.approx(0.8)

    def test_fenced_completion_is_unwrapped(self, client_with_provider, sample_plan):
        client, provider = client_with_provider
        provider.content = f"```json\n{json.dumps(sample_plan)}\n```"

        response = client.post("/api/generate", json=BRIEF)

        assert response.status_code == 200
        assert response.json() == sample_plan

    def test_missing_completion_returns_empty_plan(self, client_with_provider):
        client, provider = client_with_provider
        provider.content = None

        response = client.post("/api/generate", json=BRIEF)

        assert response.status_code == 200
        data = response.json()
        assert data["headline"] == "Creative output unavailable"
        assert data["storyline"] == []
        assert data["metadata"]["hashtags"] == []

    def test_plan_is_not_revalidated(self, client_with_provider):
        """Unexpected keys and shapes pass through untouched."""
        client, provider = client_with_provider
        provider.content = '{"headline": 42, "surprise": ["extra"]}'

        response = client.post("/api/generate", json=BRIEF)

        assert response.status_code == 200
        assert response.json() == {"headline": 42, "surprise": ["extra"]}

    def test_partial_brief_uses_defaults(self, client_with_provider):
        client, provider = client_with_provider

        response = client.post("/api/generate", json={"topic": "Volcanoes"})

        assert response.status_code == 200
        user_prompt = provider.calls[0]["user_prompt"]
        assert "Target age group: Ages 5-8" in user_prompt
        assert "Ideal runtime: 45 seconds" in user_prompt


class TestGenerateTemperature:
    """Creativity from the brief controls the provider temperature."""

    @pytest.mark.parametrize(
        "creativity,expected",
        [(0.0, 0.2), (0.5, 0.7), (1.0, 0.95), (None, 0.8), ("lots", 0.8), (3.0, 0.8), (-1, 0.8)],
    )
    def test_temperature_from_creativity(self, client_with_provider, creativity, expected):
        client, provider = client_with_provider

        client.post("/api/generate", json={**BRIEF, "creativity": creativity})

        assert provider.calls[0]["temperature"] == pytest.approx(expected)

    def test_missing_creativity_field(self, client_with_provider):
        client, provider = client_with_provider
        brief = {key: value for key, value in BRIEF.items() if key != "creativity"}

        client.post("/api/generate", json=brief)

        assert provider.calls[0]["temperature"] == pytest.approx(0.8)

    def test_runtime_clamped_in_prompt(self, client_with_provider):
        client, provider = client_with_provider

        client.post("/api/generate", json={**BRIEF, "runtimeSeconds": 300})

        assert "Ideal runtime: 90 seconds" in provider.calls[0]["user_prompt"]


class TestGenerateFailures:
    """Every failure path answers with an {"error": ...} body."""

    def test_missing_credential_returns_500_without_provider_call(self, client, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        with patch("backend.core.provider.AsyncOpenAI") as mock_openai:
            response = client.post("/api/generate", json=BRIEF)

        assert response.status_code == 500
        assert response.json() == {"error": MISSING_KEY_MESSAGE}
        mock_openai.assert_not_called()

    def test_missing_credential_checked_before_brief_validation(self, client, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        response = client.post("/api/generate", json={"tone": "Spooky"})

        assert response.status_code == 500
        assert response.json() == {"error": MISSING_KEY_MESSAGE}

    def test_missing_provider_override_returns_500(self, client_with_provider):
        client, provider = client_with_provider
        app.dependency_overrides[get_completion_provider] = lambda: None

        response = client.post("/api/generate", json=BRIEF)

        assert response.status_code == 500
        assert response.json() == {"error": MISSING_KEY_MESSAGE}
        assert provider.calls == []

    def test_provider_error_returns_502_without_leaking_body(self, client_with_provider):
        client, provider = client_with_provider
        provider.error = ProviderError(
            "Provider returned HTTP 500", status_code=500, body="secret upstream trace"
        )

        response = client.post("/api/generate", json=BRIEF)

        assert response.status_code == 502
        assert response.json() == {"error": PROVIDER_FAILED_MESSAGE}
        assert "secret" not in response.text

    def test_provider_error_body_is_logged(self, client_with_provider):
        client, provider = client_with_provider
        provider.error = ProviderError("HTTP 401", status_code=401, body='{"error": "bad key"}')

        with patch("backend.api.services.plan_generation.generation_logger") as mock_logger:
            client.post("/api/generate", json=BRIEF)

        mock_logger.provider_failed.assert_called_once_with(401, '{"error": "bad key"}')

    def test_unparseable_completion_returns_500(self, client_with_provider):
        client, provider = client_with_provider
        provider.content = "```json\nHere is a fun plan!\n```"

        response = client.post("/api/generate", json=BRIEF)

        assert response.status_code == 500
        assert response.json() == {"error": FORMAT_FAILED_MESSAGE}

    @pytest.mark.parametrize(
        "content",
        ['{"headline": NaN}', '{"headline": -Infinity}', "[" * 100000 + "]" * 100000],
    )
    def test_non_standard_json_returns_format_error(self, client_with_provider, content):
        client, provider = client_with_provider
        provider.content = content

        response = client.post("/api/generate", json=BRIEF)

        assert response.status_code == 500
        assert response.json() == {"error": FORMAT_FAILED_MESSAGE}

    def test_overflowing_number_returned_as_null(self, client_with_provider):
        client, provider = client_with_provider
        provider.content = '{"headline": "Big", "views": 1e999}'

        response = client.post("/api/generate", json=BRIEF)

        assert response.status_code == 200
        assert response.json() == {"headline": "Big", "views": None}

    def test_unknown_preset_returns_422_error_body(self, client_with_provider):
        client, provider = client_with_provider

        response = client.post("/api/generate", json={**BRIEF, "tone": "Grim & Gritty"})

        assert response.status_code == 422
        assert "error" in response.json()
        assert provider.calls == []

    def test_each_submission_calls_provider_once(self, client_with_provider):
        client, provider = client_with_provider
        provider.content = "not json"

        client.post("/api/generate", json=BRIEF)

        assert len(provider.calls) == 1


@pytest.fixture
def provider_transport(monkeypatch):
    """Route the real provider dependency through an in-memory transport.

    Set ``transport.handler`` to answer the chat-completion request.
    """
    transport = MagicMock()
    real_provider = OpenAIChatProvider

    def build_provider(**kwargs):
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: transport.handler(request))
        )
        return real_provider(http_client=http_client, **kwargs)

    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr("backend.api.dependencies.OpenAIChatProvider", build_provider)
    return transport


class TestGenerateWithRealProvider:
    """The real provider dependency wired to a mocked HTTP transport."""

    def test_end_to_end_with_mocked_transport(self, client, monkeypatch, provider_transport, sample_plan):
        monkeypatch.setenv("OPENAI_MODEL", "gpt-test")
        sent = {}

        def handler(request):
            sent.update(json.loads(request.content))
            return httpx.Response(
                200,
                json={
                    "id": "chatcmpl-test",
                    "object": "chat.completion",
                    "created": 0,
                    "model": "gpt-test",
                    "choices": [
                        {
                            "index": 0,
                            "finish_reason": "stop",
                            "message": {"role": "assistant", "content": json.dumps(sample_plan)},
                        }
                    ],
                },
            )

        provider_transport.handler = handler

        response = client.post("/api/generate", json=BRIEF)

        assert response.status_code == 200
        assert response.json() == sample_plan
        assert sent["model"] == "gpt-test"
        assert sent["response_format"] == {"type": "json_object"}

    def test_provider_http_error_returns_502(self, client, provider_transport):
        provider_transport.handler = lambda request: httpx.Response(503, text="upstream overloaded")

        response = client.post("/api/generate", json=BRIEF)

        assert response.status_code == 502
        assert response.json() == {"error": PROVIDER_FAILED_MESSAGE}


class TestHealth:
    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
