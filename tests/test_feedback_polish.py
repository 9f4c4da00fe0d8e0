"""Tests for feedback polishing through the Hugging Face backend."""

import json

import httpx
import pytest

from profile_api.config import get_settings
from profile_api.exceptions import (
    ServiceDisabledError,
    UpstreamError,
    UpstreamTimeoutError,
    ValidationError,
)
from profile_api.providers.huggingface import SYSTEM_PROMPT, HuggingFaceTextPolisher
from profile_api.services.feedback_polish_service import FeedbackPolishService

API_URL = "https://polisher.test/v1/chat/completions"
DRAFT = "you did ok on the release i guess"


def _completion(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _service(handler, **overrides) -> FeedbackPolishService:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    polisher = HuggingFaceTextPolisher(
        api_url=API_URL,
        model="test-model",
        api_key="hf_test",
        timeout=2.0,
        client=client,
    )
    settings = get_settings().model_copy(update={"polisher_enabled": True, **overrides})
    return FeedbackPolishService(polisher, settings)


class TestPolish:
    """Tests for FeedbackPolishService.polish."""

    async def test_success(self):
        """The first choice's content is returned with the trimmed draft."""
        captured: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["auth"] = request.headers["Authorization"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json=_completion("  Great work on the release!  "))

        result = await _service(handler).polish(f"  {DRAFT}  ")

        assert result.original_text == DRAFT
        assert result.polished_text == "Great work on the release!"
        assert captured["auth"] == "Bearer hf_test"
        assert captured["body"]["model"] == "test-model"
        assert captured["body"]["stream"] is False
        messages = captured["body"]["messages"]
        assert messages[0] == {"role": "system", "content": SYSTEM_PROMPT}
        assert messages[1]["content"] == f'Original feedback: "{DRAFT}"'

    async def test_disabled(self):
        """A disabled polisher is never called."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("polisher should not be called")

        with pytest.raises(ServiceDisabledError):
            await _service(handler, polisher_enabled=False).polish(DRAFT)

    async def test_too_short(self):
        """Drafts under the minimum length are rejected before any call."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("polisher should not be called")

        with pytest.raises(ValidationError):
            await _service(handler).polish("   short   ")

    async def test_timeout(self):
        """A slow backend surfaces as a timeout."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(UpstreamTimeoutError):
            await _service(handler).polish(DRAFT)

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(500, json={"error": "boom"}),
            httpx.Response(200, json=_completion("   ")),
            httpx.Response(200, json={"choices": []}),
            httpx.Response(200, content=b"not json"),
        ],
    )
    async def test_upstream_failures(self, response: httpx.Response):
        """Errors, empty output and garbage all map to an upstream error."""

        def handler(request: httpx.Request) -> httpx.Response:
            return response

        with pytest.raises(UpstreamError) as exc_info:
            await _service(handler).polish(DRAFT)
        assert not isinstance(exc_info.value, UpstreamTimeoutError)

    async def test_connection_error(self):
        """Transport failures map to an upstream error."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(UpstreamError):
            await _service(handler).polish(DRAFT)
