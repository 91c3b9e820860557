"""
Test suite for PredictionModelClient.

The model service is replaced by httpx.MockTransport handlers.

System role: Verification of the external model boundary
"""

import json

import httpx
import pytest

from footwatch.boundary.ml.model_client import PredictionModelClient
from footwatch.configs.prediction import PredictionSettings
from footwatch.core.exceptions import UpstreamDegradedError


def make_client(handler, url: str | None = "http://model.test") -> PredictionModelClient:
    """Build a model client whose HTTP calls go to ``handler``."""
    settings = PredictionSettings(url=url, timeout_seconds=0.5)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return PredictionModelClient(settings, http_client)


class TestPredictionModelClient:
    """Test suite for PredictionModelClient.predict()."""

    async def test_posts_payload_and_returns_body(self) -> None:
        """Test the payload is posted to the predict endpoint."""
        # Arrange
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"condition": "normal", "confidence": 0.9})

        client = make_client(handler)

        # Act
        body = await client.predict({"metadata": {"age": 40}, "pressure": None})

        # Assert
        assert body == {"condition": "normal", "confidence": 0.9}
        assert seen["url"] == "http://model.test/predict"
        assert seen["body"]["metadata"] == {"age": 40}

    async def test_timeout_is_degraded(self) -> None:
        """Test a timeout surfaces as UpstreamDegradedError."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(UpstreamDegradedError) as exc_info:
            await make_client(handler).predict({})

        assert exc_info.value.details["error_type"] == "ReadTimeout"

    async def test_connection_error_is_degraded(self) -> None:
        """Test transport failures surface as UpstreamDegradedError."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(UpstreamDegradedError):
            await make_client(handler).predict({})

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(503, json={"error": "overloaded"}),
            httpx.Response(200, content=b"<html>oops</html>"),
            httpx.Response(200, json=[0.1, 0.9]),
        ],
    )
    async def test_bad_responses_are_degraded(self, response: httpx.Response) -> None:
        """Test non-2xx, non-JSON and non-object bodies are degraded."""
        with pytest.raises(UpstreamDegradedError):
            await make_client(lambda request: response).predict({})

    async def test_unconfigured_client(self) -> None:
        """Test a client with no URL is disabled and refuses to call."""
        client = make_client(lambda request: httpx.Response(200, json={}), url=None)

        assert client.enabled is False
        with pytest.raises(UpstreamDegradedError):
            await client.predict({})
