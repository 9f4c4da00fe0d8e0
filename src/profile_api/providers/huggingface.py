"""Hugging Face chat-completions text polisher."""

import logging
from typing import Any, ClassVar

import httpx

from profile_api.exceptions import UpstreamError, UpstreamTimeoutError
from profile_api.providers.base import TextPolisher

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional HR communication assistant.\n"
    "Rewrite employee-to-employee feedback so it is concise (max two sentences),\n"
    "warm, inclusive, and encouraging while keeping every original fact intact.\n"
    "Do not add questions, extra context, or speculative advice.\n"
    "Preserve the original language (English, German, etc.) and avoid corporate buzzwords.\n"
    "Return only the polished feedback text."
)


class HuggingFaceTextPolisher(TextPolisher):
    """Polishes feedback through the Hugging Face router.

    Uses the OpenAI-compatible chat-completions endpoint with a bearer
    access token. One HTTP client is shared across instances; close it
    with ``close_client`` on shutdown.
    """

    # Shared HTTP client for connection reuse (class-level)
    _http_client: ClassVar[httpx.AsyncClient | None] = None

    def __init__(
        self,
        api_url: str,
        model: str,
        api_key: str,
        timeout: float,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the polisher.

        Args:
            api_url: Chat-completions endpoint URL
            model: Model identifier
            api_key: Hugging Face access token
            timeout: Request deadline in seconds
            client: HTTP client to use instead of the shared one
        """
        self.api_url = api_url
        self.model = model
        self.api_key = api_key
        self.timeout = timeout
        self._client = client

    @classmethod
    def _get_http_client(cls) -> httpx.AsyncClient:
        """Get or create shared HTTP client with connection pooling."""
        if cls._http_client is None or cls._http_client.is_closed:
            cls._http_client = httpx.AsyncClient(
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            )
        return cls._http_client

    @classmethod
    async def close_client(cls) -> None:
        """Close the shared HTTP client. Call on application shutdown."""
        if cls._http_client and not cls._http_client.is_closed:
            await cls._http_client.aclose()
            cls._http_client = None

    def _get_headers(self) -> dict[str, str]:
        """Get API request headers."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _build_payload(self, text: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "stream": False,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": f'Original feedback: "{text}"'},
            ],
        }

    @staticmethod
    def _extract_content(data: Any) -> str:
        """Pull the first choice's message content out of a response body."""
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return ""
        return content.strip() if isinstance(content, str) else ""

    async def polish(self, text: str) -> str:
        """Rewrite feedback text via chat completions.

        Args:
            text: Trimmed feedback text

        Returns:
            Polished text

        Raises:
            UpstreamTimeoutError: If the call exceeds the configured timeout
            UpstreamError: On HTTP errors, transport failures or empty output
        """
        client = self._client or self._get_http_client()
        try:
            response = await client.post(
                self.api_url,
                headers=self._get_headers(),
                json=self._build_payload(text),
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            logger.warning("Feedback polishing timed out after %ss", self.timeout)
            raise UpstreamTimeoutError() from e
        except httpx.HTTPStatusError as e:
            logger.error("Feedback polishing failed with HTTP %s", e.response.status_code)
            raise UpstreamError("AI service returned an error") from e
        except httpx.HTTPError as e:
            logger.error("Feedback polishing request failed: %s", type(e).__name__)
            raise UpstreamError("AI service is unreachable") from e
        except ValueError as e:
            logger.error("Feedback polishing returned a non-JSON body")
            raise UpstreamError("AI service returned an invalid response") from e

        polished = self._extract_content(data)
        if not polished:
            logger.error("Feedback polishing returned empty content")
            raise UpstreamError("AI service returned empty response")
        return polished
