"""
Device bearer-secret authentication.

Monitoring hardware authenticates with one shared secret, not a
per-user session.

Dependencies: hmac (stdlib), footwatch.core.exceptions
System role: Authentication boundary of the device ingestion gateway
"""

import hmac

from pydantic import SecretStr

from footwatch.core.exceptions import UnauthenticatedError

BEARER_PREFIX = "Bearer "


class DeviceAuthenticator:
    """Checks ``Authorization: Bearer <secret>`` against the configured secret."""

    def __init__(self, secret: SecretStr | None) -> None:
        self._secret = secret.get_secret_value().encode() if secret and secret.get_secret_value() else None

    @property
    def configured(self) -> bool:
        return self._secret is not None

    def authenticate(self, authorization: str | None) -> None:
        """
        Verify a device Authorization header.

        Args:
            authorization: Raw header value, None when absent

        Raises:
            UnauthenticatedError: Missing header, wrong scheme, wrong secret,
                or no secret configured
        """
        if self._secret is None or not authorization or not authorization.startswith(BEARER_PREFIX):
            raise UnauthenticatedError("Unauthorized device")
        presented = authorization[len(BEARER_PREFIX):].encode()
        if not hmac.compare_digest(presented, self._secret):
            raise UnauthenticatedError("Unauthorized device")
