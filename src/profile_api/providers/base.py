"""Base text polisher interface."""

from abc import ABC, abstractmethod


class TextPolisher(ABC):
    """Abstract base class for feedback rewriting backends."""

    @abstractmethod
    async def polish(self, text: str) -> str:
        """Rewrite feedback text.

        Args:
            text: Trimmed feedback text

        Returns:
            Rewritten text, never empty

        Raises:
            UpstreamError: If the backend fails or returns nothing
            UpstreamTimeoutError: If the backend exceeds its deadline
        """
        pass
