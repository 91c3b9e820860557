"""
Administrative analytics.

Dependencies: footwatch.boundary.stores
System role: Aggregate counts for the admin dashboard
"""

from datetime import datetime
from typing import Callable

from footwatch.boundary.db.base import utc_now
from footwatch.boundary.identity import CallerIdentity
from footwatch.boundary.stores import ReportStore, SessionStore
from footwatch.core.outcomes import NORMAL_CONDITION
from footwatch.core.session_state import SessionStatus


class AnalyticsService:
    """Cross-user counts, administrators only."""

    def __init__(
        self,
        sessions: SessionStore,
        reports: ReportStore,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.sessions = sessions
        self.reports = reports
        self.clock = clock

    async def summary(self, caller: CallerIdentity) -> dict[str, int]:
        """
        Aggregate session and report counts.

        Raises:
            ForbiddenError: If caller is not an administrator
        """
        caller.require_admin()
        midnight = self.clock().replace(hour=0, minute=0, second=0, microsecond=0)
        return {
            "total_sessions": await self.sessions.count(),
            "active_sessions": await self.sessions.count(status=SessionStatus.ACTIVE),
            "sessions_today": await self.sessions.count(started_since=midnight),
            "total_reports": await self.reports.count(),
            "flagged_reports": await self.reports.count(exclude_condition=NORMAL_CONDITION),
        }
