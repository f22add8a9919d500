"""
Brief form state for Kid Shorts Studio.

BriefForm holds what one page view of the form holds: the brief being
edited, the last generated plan, the current error, and a short-lived
notice. It issues at most one generation request at a time.
"""

import threading
import time
from typing import Callable, Optional

from backend.api.models.requests import BriefRequest
from backend.api.models.responses import GeneratedPlanResponse, SceneResponse

from .api_client import BriefSubmissionError, GenerationClient
from .clipboard import write_clipboard
from .render import COPY_SECTIONS

PREVIEW_SCENE_COUNT = 3
NOTICE_SECONDS = 2.5
COPIED_NOTICE = "Copied to clipboard!"


def default_brief() -> BriefRequest:
    """A fresh brief with the form defaults."""
    return BriefRequest()


class BriefForm:
    """Mutable creative brief plus the outcome of the latest submission."""

    def __init__(
        self,
        client: GenerationClient,
        clipboard: Optional[Callable[[str], bool]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.clipboard = clipboard or write_clipboard
        self.clock = clock

        self.brief = default_brief()
        self.result: Optional[GeneratedPlanResponse] = None
        self.error_message: Optional[str] = None

        self._submit_lock = threading.Lock()
        self._notice: Optional[str] = None
        self._notice_expires_at = 0.0

    @property
    def is_loading(self) -> bool:
        """True while a submission is in flight."""
        return self._submit_lock.locked()

    def update(self, **fields) -> BriefRequest:
        """Change brief fields by name, e.g. ``update(topic="Volcanoes")``.

        Raises:
            ValueError: unknown field name or invalid preset value
        """
        unknown = set(fields) - set(BriefRequest.model_fields)
        if unknown:
            raise ValueError(f"Unknown brief field(s): {', '.join(sorted(unknown))}")

        data = self.brief.model_dump()
        data.update(fields)
        self.brief = BriefRequest.model_validate(data)
        return self.brief

    def submit(self) -> Optional[GeneratedPlanResponse]:
        """Send the brief to the generation endpoint.

        Returns the new plan, or None if the submission failed or another
        one is already in flight.
        """
        if not self._submit_lock.acquire(blocking=False):
            return None

        try:
            self.error_message = None
            self.result = None
            self.result = self.client.generate(self.brief)
        except BriefSubmissionError as e:
            self.error_message = e.message
        finally:
            self._submit_lock.release()

        return self.result

    @property
    def scene_preview(self) -> list[SceneResponse]:
        """The first three scenes of the current plan, in order."""
        if self.result is None:
            return []
        return self.result.storyline[:PREVIEW_SCENE_COUNT]

    def reset(self) -> None:
        """Restore the default brief and clear the plan and error."""
        self.brief = default_brief()
        self.result = None
        self.error_message = None

    @property
    def notice(self) -> Optional[str]:
        """Transient confirmation message, cleared after NOTICE_SECONDS."""
        if self._notice is not None and self.clock() >= self._notice_expires_at:
            self._notice = None
        return self._notice

    def copy(self, text: str) -> bool:
        """Copy text to the clipboard; silently does nothing if unavailable."""
        if not self.clipboard(text):
            return False
        self._notice = COPIED_NOTICE
        self._notice_expires_at = self.clock() + NOTICE_SECONDS
        return True

    def copy_section(self, name: str) -> bool:
        """Copy one formatted section (beats, script, metadata) of the plan."""
        if name not in COPY_SECTIONS:
            raise ValueError(f"Unknown section '{name}'. Choose from: {', '.join(COPY_SECTIONS)}")
        if self.result is None:
            return False
        return self.copy(COPY_SECTIONS[name](self.result))
