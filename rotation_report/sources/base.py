"""Base protocol for on-call data sources."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol


class OnCallSource(Protocol):
    """Interface for services that know the schedule, incidents and alerts."""

    def fetch_oncalls(self) -> list[dict[str, Any]]:
        """Return the raw entries of everyone currently on call."""

    def fetch_incidents(self, since: datetime, until: datetime) -> list[dict[str, Any]]:
        """Return raw incidents created between ``since`` and ``until``."""

    def fetch_notifications(
        self, since: datetime, until: datetime
    ) -> list[dict[str, Any]]:
        """Return raw alert notifications sent between ``since`` and ``until``."""


__all__ = ["OnCallSource"]
