"""
Caller identity resolution.

The user directory (accounts, profiles, roles) is an external
collaborator. This module is the narrow seam the service consumes it
through: a resolver turns request headers into a CallerIdentity.

Dependencies: footwatch.configs, footwatch.core.exceptions
System role: Identity boundary for user-authenticated endpoints
"""

import enum
from dataclasses import dataclass
from typing import Mapping, Protocol

from footwatch.configs.identity import IdentitySettings
from footwatch.core.exceptions import ForbiddenError, UnauthenticatedError


class Role(str, enum.Enum):
    """Directory roles."""

    PATIENT = "patient"
    DOCTOR = "doctor"
    ADMIN = "admin"


@dataclass(frozen=True)
class CallerIdentity:
    """Authenticated user making a request."""

    user_id: str
    role: Role = Role.PATIENT

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def can_access(self, owner_id: str) -> bool:
        """Owner or administrator."""
        return self.is_admin or self.user_id == owner_id

    def require_admin(self) -> None:
        if not self.is_admin:
            raise ForbiddenError("Administrator role required", {"role": self.role.value})


class IdentityResolver(Protocol):
    """Resolves request headers to a caller identity."""

    def resolve(self, headers: Mapping[str, str]) -> CallerIdentity:
        """Return the caller or raise UnauthenticatedError."""
        ...


class HeaderIdentityResolver:
    """
    Trusts identity headers set by the upstream auth proxy.

    The proxy validates the user's session and forwards the user id and
    role; requests that reach the service without them are rejected.
    """

    def __init__(self, settings: IdentitySettings) -> None:
        self.user_header = settings.user_header
        self.role_header = settings.role_header
        self.default_role = Role(settings.default_role)

    def resolve(self, headers: Mapping[str, str]) -> CallerIdentity:
        """
        Resolve the caller from request headers.

        Args:
            headers: Request headers (case-insensitive mapping)

        Returns:
            CallerIdentity: Resolved caller

        Raises:
            UnauthenticatedError: If the user header is missing or blank
                or the role is not a known role
        """
        user_id = (headers.get(self.user_header) or "").strip()
        if not user_id:
            raise UnauthenticatedError("Unauthorized")

        raw_role = (headers.get(self.role_header) or "").strip().lower()
        if not raw_role:
            return CallerIdentity(user_id=user_id, role=self.default_role)
        try:
            role = Role(raw_role)
        except ValueError:
            raise UnauthenticatedError("Unauthorized", {"role": raw_role}) from None
        return CallerIdentity(user_id=user_id, role=role)
