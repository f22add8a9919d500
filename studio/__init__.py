"""Brief form client for Kid Shorts Studio."""

from .api_client import BriefSubmissionError, GenerationClient
from .form import BriefForm, default_brief

__all__ = [
    "BriefForm",
    "BriefSubmissionError",
    "GenerationClient",
    "default_brief",
]
