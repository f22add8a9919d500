"""
Generation failures and the user-facing message for each.

Every error carries the HTTP status the endpoint answers with and a
single-line message that is safe to show to the person filling the brief.
Provider payloads stay on the exception for logging and never reach
``user_message``.
"""

from typing import Optional


class GenerationError(Exception):
    """Base class for failures while generating a plan."""

    http_status: int = 500
    user_message: str = "We hit a snag creating the short. Give it another go!"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.user_message)


class MissingCredentialError(GenerationError):
    """Raised when the provider API key is not configured."""

    http_status = 500
    user_message = (
        "Missing OPENAI_API_KEY. Add it to your environment before generating content."
    )


class ProviderError(GenerationError):
    """Raised when the provider call fails or returns a non-success status."""

    http_status = 502
    user_message = "The model could not generate a short. Please try again."

    def __init__(
        self,
        detail: Optional[str] = None,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(detail)
        self.status_code = status_code
        self.body = body


class PlanFormatError(GenerationError):
    """Raised when the completion text is not JSON, even after cleanup."""

    http_status = 500
    user_message = (
        "Generation succeeded but the response formatting failed. Try running again."
    )

    def __init__(self, detail: Optional[str] = None, content: str = ""):
        super().__init__(detail)
        self.content = content
