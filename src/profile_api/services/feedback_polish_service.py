"""Feedback polishing service."""

import logging

from profile_api.config import Settings, get_settings
from profile_api.constants.validation import POLISH_MIN_CHARS
from profile_api.exceptions import ServiceDisabledError, ValidationError
from profile_api.models.dto.feedback import PolishResponse
from profile_api.providers.base import TextPolisher
from profile_api.providers.huggingface import HuggingFaceTextPolisher

logger = logging.getLogger(__name__)


class FeedbackPolishService:
    """Rewrites feedback drafts through an external text polisher.

    Holds no database session, so the outbound call never runs inside a
    transaction.
    """

    def __init__(self, polisher: TextPolisher, settings: Settings | None = None) -> None:
        """Initialize service.

        Args:
            polisher: Text polishing backend
            settings: Application settings (defaults to the cached settings)
        """
        self.polisher = polisher
        self.settings = settings or get_settings()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "FeedbackPolishService":
        """Build the service with the configured Hugging Face backend."""
        settings = settings or get_settings()
        polisher = HuggingFaceTextPolisher(
            api_url=settings.polisher_api_url,
            model=settings.polisher_model,
            api_key=settings.polisher_api_key,
            timeout=settings.polisher_timeout_seconds,
        )
        return cls(polisher, settings)

    async def polish(self, text: str) -> PolishResponse:
        """Polish a feedback draft.

        Args:
            text: Draft feedback

        Returns:
            Original (trimmed) and polished text

        Raises:
            ServiceDisabledError: If polishing is switched off
            ValidationError: If the trimmed draft is too short
            UpstreamError: If the backend fails or returns nothing
            UpstreamTimeoutError: If the backend exceeds its deadline
        """
        if not self.settings.polisher_enabled:
            raise ServiceDisabledError("AI feedback polishing is currently disabled")

        original = text.strip()
        if len(original) < POLISH_MIN_CHARS:
            raise ValidationError.for_field(
                "text", f"Feedback must be at least {POLISH_MIN_CHARS} characters"
            )

        polished = await self.polisher.polish(original)
        logger.info("Polished feedback draft (%d -> %d chars)", len(original), len(polished))
        return PolishResponse(original_text=original, polished_text=polished)
