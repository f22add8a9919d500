"""API configuration constants.

Single source of truth for settings used across the API layer.
"""

import os

from dotenv import find_dotenv, load_dotenv

# Load .env from project root (find_dotenv searches parent directories)
load_dotenv(find_dotenv())

APP_TITLE = "Kid Shorts Studio API"
APP_DESCRIPTION = """
AI creative director that plans engaging, kid-safe YouTube Shorts for your channel.

## Workflow
1. POST `/api/generate` with a creative brief
2. Receive the full plan: hook, storyboard, script, metadata, thumbnails, repurposing ideas
"""

API_PREFIX = "/api"
GENERATE_ROUTE = "/generate"
GENERATE_PATH = API_PREFIX + GENERATE_ROUTE


def get_cors_origins() -> list[str]:
    """Allowed CORS origins from CORS_ORIGINS (comma separated), default all."""
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def use_json_logs() -> bool:
    """JSON logs unless LOG_FORMAT=text."""
    return os.getenv("LOG_FORMAT", "json").lower() != "text"
