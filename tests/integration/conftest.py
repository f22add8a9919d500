"""Pytest configuration for live provider tests."""

import os

import pytest
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@pytest.fixture(scope="session")
def llm_api_available():
    """Check if the provider API key is configured."""
    return bool(os.getenv("OPENAI_API_KEY"))
