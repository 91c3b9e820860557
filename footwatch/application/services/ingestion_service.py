"""
Device ingestion gateway.

Accepts telemetry from monitoring hardware authenticated by the shared
device secret. Authentication happens before the body is even parsed;
validation happens before anything is written.

The gateway does not check that the session belongs to anyone. The sample
store still rejects unknown and ended sessions.

Dependencies: pydantic, footwatch.boundary, footwatch.models.sample
System role: Device telemetry ingestion use case
"""

import json
import logging
from typing import Any

import pydantic

from footwatch.boundary.device_auth import DeviceAuthenticator
from footwatch.boundary.stores import SampleStore
from footwatch.core.exceptions import UnauthenticatedError, ValidationError
from footwatch.models.sample import DeviceSampleRequest
from footwatch.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class IngestionService:
    """Device ingestion gateway."""

    def __init__(self, authenticator: DeviceAuthenticator, samples: SampleStore) -> None:
        """
        Initialize ingestion gateway.

        Args:
            authenticator: Device bearer-secret checker
            samples: Sample store
        """
        self.authenticator = authenticator
        self.samples = samples

    def authenticate(self, authorization: str | None) -> None:
        """Reject the request unless it carries the device secret."""
        try:
            self.authenticator.authenticate(authorization)
        except UnauthenticatedError:
            logger.warning(
                "Device authentication failed",
                extra={"has_header": authorization is not None},
            )
            raise

    async def ingest(self, authorization: str | None, raw_body: bytes):
        """
        Authenticate, validate and store one device sample.

        Args:
            authorization: Raw Authorization header
            raw_body: Request body bytes

        Returns:
            SampleModel: Stored sample

        Raises:
            UnauthenticatedError: Bad or missing device secret
            ValidationError: Body is not JSON or violates the sample schema
            SessionNotFoundError: session_id does not exist
            SessionTerminalError: Session has ended
        """
        self.authenticate(authorization)
        request = parse_device_payload(raw_body)
        grid = request.to_grid()

        sample = await self.samples.append(
            session_id=request.session_id,
            grid=grid,
            foot=request.foot.value,
            stats=request.stats,
            captured_at=request.captured_at,
        )
        await self.samples.commit()
        log_with_context(
            logger,
            logging.INFO,
            "Device sample ingested",
            session_id=str(request.session_id),
            grid=f"{grid.width}x{grid.height}",
            foot=request.foot.value,
        )
        return sample


def parse_device_payload(raw_body: bytes) -> DeviceSampleRequest:
    """
    Decode and validate a device request body.

    Args:
        raw_body: Request body bytes

    Returns:
        DeviceSampleRequest: Validated payload

    Raises:
        ValidationError: With per-field errors under details["errors"]
    """
    try:
        body: Any = json.loads(raw_body or b"")
    except ValueError:
        raise ValidationError("Request body must be valid JSON", field="body") from None

    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object", field="body")

    try:
        return DeviceSampleRequest.model_validate(body)
    except pydantic.ValidationError as e:
        raise ValidationError(
            "Invalid payload",
            details={"errors": field_errors(e)},
        ) from None


def field_errors(error: pydantic.ValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic errors to {field, message, type} entries."""
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]) or "body",
            "message": err["msg"],
            "type": err["type"],
        }
        for err in error.errors()
    ]
