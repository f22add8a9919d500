"""Plan generation service: one brief in, one provider call, one parsed plan out."""

import time
from typing import Any

from backend.core.errors import PlanFormatError, ProviderError
from backend.core.plan_parser import parse_plan_text
from backend.core.prompts import (
    EMPTY_PLAN_JSON,
    SYSTEM_PROMPT,
    build_user_prompt,
    derive_temperature,
)
from backend.core.provider import CompletionProvider

from ..logging import generation_logger
from ..models.requests import BriefRequest


class PlanGenerationService:
    """Turns a creative brief into a production plan."""

    def __init__(self, provider: CompletionProvider):
        self.provider = provider

    async def generate(self, brief: BriefRequest) -> Any:
        """
        Generate a plan for the brief.

        Args:
            brief: The creative brief submitted by the form

        Returns:
            The provider's JSON, parsed but not validated against the schema.

        Raises:
            ProviderError: the provider call failed
            PlanFormatError: the completion was not JSON after cleanup
        """
        user_prompt = build_user_prompt(brief)
        temperature = derive_temperature(brief.creativity)

        start_time = time.time()
        generation_logger.generation_started(self.provider.model, temperature)

        try:
            content = await self.provider.complete(SYSTEM_PROMPT, user_prompt, temperature)
        except ProviderError as e:
            generation_logger.provider_failed(e.status_code, e.body or str(e))
            raise

        if content is None:
            content = EMPTY_PLAN_JSON

        try:
            plan = parse_plan_text(content)
        except PlanFormatError as e:
            generation_logger.format_failed(e, content)
            raise

        generation_logger.generation_completed(time.time() - start_time)
        return plan
