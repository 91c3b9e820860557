"""
Prediction model HTTP client.

Wraps a single bounded POST to the external model service. Every failure
mode (unconfigured, transport error, timeout, non-2xx, malformed body)
surfaces as UpstreamDegradedError so the pipeline can fall back.

Dependencies: httpx, footwatch.configs, footwatch.core.exceptions
System role: Boundary adapter for the external model endpoint
"""

import logging
from typing import Any

import httpx

from footwatch.configs.prediction import PredictionSettings
from footwatch.core.exceptions import UpstreamDegradedError

logger = logging.getLogger(__name__)


class PredictionModelClient:
    """
    Client for the external prediction model.

    The httpx.AsyncClient is created once at startup and shared; the client
    never retries, so the caller's worst-case wait is one timeout.
    """

    def __init__(self, settings: PredictionSettings, http_client: httpx.AsyncClient) -> None:
        """
        Initialize model client.

        Args:
            settings: Prediction settings (endpoint, timeout)
            http_client: Shared async HTTP client
        """
        self.endpoint = settings.endpoint
        self.timeout = httpx.Timeout(settings.timeout_seconds)
        self.http_client = http_client

    @property
    def enabled(self) -> bool:
        """Whether a model endpoint is configured."""
        return self.endpoint is not None

    async def predict(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Send one prediction request.

        Args:
            payload: JSON body (session_id, metadata, pressure)

        Returns:
            dict: Decoded JSON object from the model

        Raises:
            UpstreamDegradedError: On any failure, timeout included
        """
        if self.endpoint is None:
            raise UpstreamDegradedError("Prediction model is not configured")

        try:
            response = await self.http_client.post(
                self.endpoint,
                json=payload,
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            raise UpstreamDegradedError(
                "Prediction model timed out",
                details={"error_type": type(e).__name__},
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamDegradedError(
                "Prediction model unreachable",
                details={"error_type": type(e).__name__},
            ) from e

        if not response.is_success:
            raise UpstreamDegradedError(
                f"Prediction model error {response.status_code}",
                details={"status_code": response.status_code},
            )

        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamDegradedError("Prediction model returned invalid JSON") from e

        if not isinstance(body, dict):
            raise UpstreamDegradedError(
                "Prediction model returned a non-object body",
                details={"body_type": type(body).__name__},
            )

        logger.debug("Prediction model answered", extra={"status_code": response.status_code})
        return body
