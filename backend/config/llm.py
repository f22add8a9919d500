"""
LLM provider configuration for Kid Shorts Studio.

The generation endpoint talks to a single chat-completion provider
(OpenAI-compatible). Credentials and model selection come from the
environment so a deployment only needs:

- OPENAI_API_KEY: required, generation fails fast without it
- OPENAI_MODEL: optional model override
- OPENAI_BASE_URL: optional, for OpenAI-compatible gateways

Values are read at call time, not import time, so a key added to the
environment after startup is picked up on the next request.
"""

import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Timeout for LLM calls (seconds)
LLM_TIMEOUT = 120

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_BASE_URL = "https://api.openai.com/v1"


def get_provider_api_key() -> Optional[str]:
    """Get the provider API key, or None if it is not configured."""
    return os.getenv("OPENAI_API_KEY") or None


def get_model_name() -> str:
    """Get the model identifier sent to the provider."""
    return os.getenv("OPENAI_MODEL") or DEFAULT_MODEL


def get_provider_base_url() -> str:
    """Get the provider base URL without a trailing slash."""
    return (os.getenv("OPENAI_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
