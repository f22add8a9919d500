"""
Provider capability for chat-completion LLMs.

The endpoint only needs "given a system prompt and a user prompt, return
JSON-shaped completion text". CompletionProvider captures that so the
generation flow does not depend on how the provider is reached.
"""

import abc
import logging
from typing import Optional

import httpx
from openai import APIStatusError, AsyncOpenAI, OpenAIError
from openai.types.chat import ChatCompletion

from ..config.llm import DEFAULT_BASE_URL, DEFAULT_MODEL, LLM_TIMEOUT
from .errors import ProviderError

logger = logging.getLogger(__name__)


class CompletionProvider(abc.ABC):
    """Abstract interface for the completion service."""

    model: str = ""

    @abc.abstractmethod
    async def complete(
        self, system_prompt: str, user_prompt: str, temperature: float
    ) -> Optional[str]:
        """Return the completion text, or None if the provider sent none.

        Raises:
            ProviderError: if the provider could not be reached or failed
        """
        raise NotImplementedError


class OpenAIChatProvider(CompletionProvider):
    """OpenAI-compatible chat completions through the ``openai`` SDK.

    Requests JSON-object output so the reply parses as the plan schema.
    SDK retries are off: each brief makes exactly one provider call.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = LLM_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.model = model
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )

    def build_request(self, system_prompt: str, user_prompt: str, temperature: float) -> dict:
        return {
            "model": self.model,
            "temperature": temperature,
            "response_format": {"type": "json_object"},
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }

    async def complete(
        self, system_prompt: str, user_prompt: str, temperature: float
    ) -> Optional[str]:
        request = self.build_request(system_prompt, user_prompt, temperature)

        try:
            completion = await self.client.chat.completions.create(**request)
        except APIStatusError as e:
            raise ProviderError(
                f"Provider returned HTTP {e.status_code}",
                status_code=e.status_code,
                body=e.response.text,
            ) from e
        except OpenAIError as e:
            raise ProviderError(f"Provider request failed: {e}") from e

        # Non-JSON bodies come back from the SDK as plain text
        if not isinstance(completion, ChatCompletion):
            raise ProviderError("Provider returned an unreadable body", body=str(completion))

        # The SDK does not validate response fields, so any level may be absent
        choices = getattr(completion, "choices", None) or []
        if not choices:
            return None
        content = getattr(getattr(choices[0], "message", None), "content", None)
        return content if isinstance(content, str) else None
