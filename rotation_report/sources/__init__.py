"""On-call data sources and factory."""

from __future__ import annotations

import os

from ..config import ReportConfig
from .base import OnCallSource
from .file import FileSource
from .pagerduty import PagerDuty


def create_source(
    backend: str | None = None, config: ReportConfig | None = None
) -> OnCallSource:
    """Return an ``OnCallSource`` based on ``backend`` or environment."""

    config = config or ReportConfig()
    if backend is None:
        backend = os.getenv("ROTATION_REPORT_SOURCE")
    if backend is None:
        backend = "PAGERDUTY" if os.getenv("PAGERDUTY_API_TOKEN") else "FILE"
    backend = backend.upper()
    if backend == "PAGERDUTY":
        return PagerDuty(
            escalation_policy_id=config.escalation_policy_id,
            incident_limit=config.incident_limit,
            timeout=config.request_timeout,
            time_zone=config.timezone,
        )
    return FileSource()


__all__ = ["FileSource", "OnCallSource", "PagerDuty", "create_source"]
