"""FastAPI dependency injection for the provider and services."""

from typing import Annotated, Optional

from dotenv import find_dotenv, load_dotenv
from fastapi import Depends

# Load .env from project root (find_dotenv searches parent directories)
load_dotenv(find_dotenv())

from ..config.llm import (  # noqa: E402
    get_model_name,
    get_provider_api_key,
    get_provider_base_url,
)
from ..core.errors import MissingCredentialError  # noqa: E402
from ..core.provider import CompletionProvider, OpenAIChatProvider  # noqa: E402
from .logging import generation_logger  # noqa: E402
from .services.plan_generation import PlanGenerationService  # noqa: E402


# Provider - None when the API key is missing so the service can fail fast
def get_completion_provider() -> Optional[CompletionProvider]:
    """Build the provider from the environment, or None without a key."""
    api_key = get_provider_api_key()
    if not api_key:
        return None
    return OpenAIChatProvider(
        api_key=api_key,
        model=get_model_name(),
        base_url=get_provider_base_url(),
    )


# Service - depends on provider. Dependencies resolve before the request
# body is validated, so a missing key wins over a malformed brief.
def get_generation_service(
    provider: Annotated[Optional[CompletionProvider], Depends(get_completion_provider)]
) -> PlanGenerationService:
    """Get a PlanGenerationService instance with injected provider.

    Raises:
        MissingCredentialError: no provider API key configured
    """
    if provider is None:
        generation_logger.credential_missing()
        raise MissingCredentialError()
    return PlanGenerationService(provider)


# Type alias for cleaner route signatures
GenerationService = Annotated[PlanGenerationService, Depends(get_generation_service)]
