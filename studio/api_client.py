"""HTTP client for the plan generation endpoint."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from backend.api.config import GENERATE_PATH
from backend.api.models.requests import BriefRequest
from backend.api.models.responses import GeneratedPlanResponse
from backend.config.llm import LLM_TIMEOUT

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "http://localhost:8000"

STATUS_FALLBACK_MESSAGE = "Something went wrong. Please try again."
NETWORK_FALLBACK_MESSAGE = "We hit a snag creating the short. Give it another go!"


class BriefSubmissionError(Exception):
    """Raised when a brief could not be turned into a plan.

    ``message`` is always a single, non-technical line for display.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_text(response: httpx.Response) -> Optional[str]:
    """The server's ``error`` field, if the body carries one."""
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict) and isinstance(payload.get("error"), str):
        return payload["error"]
    return None


class GenerationClient:
    """Posts briefs to ``/api/generate`` and returns typed plans."""

    def __init__(
        self,
        base_url: str = DEFAULT_ENDPOINT,
        timeout: float = LLM_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client or httpx.Client(timeout=timeout)

    @property
    def generate_url(self) -> str:
        return f"{self.base_url}{GENERATE_PATH}"

    def generate(self, brief: BriefRequest) -> GeneratedPlanResponse:
        """
        Submit one brief.

        Raises:
            BriefSubmissionError: on any non-success status, transport
                failure or unreadable response body
        """
        try:
            response = self.http_client.post(self.generate_url, json=brief.to_payload())
        except httpx.HTTPError as e:
            logger.warning(f"Could not reach generation endpoint: {e}")
            raise BriefSubmissionError(NETWORK_FALLBACK_MESSAGE) from e

        if not response.is_success:
            message = _error_text(response) or STATUS_FALLBACK_MESSAGE
            raise BriefSubmissionError(message, status_code=response.status_code)

        try:
            return GeneratedPlanResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning(f"Unreadable plan from generation endpoint: {e}")
            raise BriefSubmissionError(NETWORK_FALLBACK_MESSAGE) from e

    def close(self) -> None:
        self.http_client.close()
