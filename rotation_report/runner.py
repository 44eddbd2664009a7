"""Fetch, aggregate and format one rotation report."""

from __future__ import annotations

import logging

from .config import ReportConfig
from .escalation import Escalation, resolve_periods
from .events import Alert, Incident
from .parse import parse_alerts, parse_incidents, parse_oncalls
from .report import build_report
from .sources.base import OnCallSource
from .summary import PeriodSummary

LOGGER = logging.getLogger(__name__)


def generate_report(source: OnCallSource, config: ReportConfig) -> str:
    """Return the report text for the rotation described by ``config``.

    Raises :class:`~rotation_report.escalation.ScheduleError` when the current
    shift cannot be found; nothing else is fetched in that case.
    """

    tz = config.zone
    oncalls = parse_oncalls(source.fetch_oncalls())
    escalation = Escalation.from_records(oncalls, config.level_labels)
    current, previous = resolve_periods(
        escalation, config.target_level, config.shift_offset
    )
    since = min(current.start, previous.start)
    until = max(current.end, previous.end)
    LOGGER.info(
        "reporting on %s - %s (compared with %s - %s)",
        current.start.isoformat(),
        current.end.isoformat(),
        previous.start.isoformat(),
        previous.end.isoformat(),
    )

    incidents: PeriodSummary[Incident] = PeriodSummary(current, previous)
    incidents.extend(parse_incidents(source.fetch_incidents(since, until), tz))
    alerts: PeriodSummary[Alert] = PeriodSummary(current, previous)
    alerts.extend(parse_alerts(source.fetch_notifications(since, until), tz))
    LOGGER.info(
        "loaded %d incident(s) and %d alert(s)", len(incidents), len(alerts)
    )
    return build_report(incidents, alerts, escalation, config)


__all__ = ["generate_report"]
