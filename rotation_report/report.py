"""Render rotation summaries as the end-of-shift text report."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Hashable, Mapping
from datetime import datetime, tzinfo

from .config import ReportConfig
from .escalation import Escalation
from .events import Alert, Incident
from .summary import PeriodSummary, pct_change


def _day(moment: datetime, tz: tzinfo | None) -> str:
    if tz is not None:
        moment = moment.astimezone(tz)
    return moment.strftime("%B %d")


def _counts(summary: Mapping[Hashable, int]) -> str:
    return ", ".join(f"{name}: {count}" for name, count in summary.items())


def top_triggers(
    triggers: Mapping[Hashable, int], limit: int
) -> list[tuple[Hashable, int]]:
    """Return the first ``limit`` triggers in the order they were first seen.

    Triggers are not ranked by count before truncating.
    """

    return list(triggers.items())[:limit]


def build_report(
    incidents: PeriodSummary[Incident],
    alerts: PeriodSummary[Alert],
    escalation: Escalation,
    config: ReportConfig,
) -> str:
    """Return the report text for ``incidents`` and ``alerts``."""

    tz = config.zone
    end_hour = config.graveyard_end_hour
    period = incidents.current_period

    def phone_or_sms(alert: Alert) -> bool:
        return alert.phone_or_sms()

    def after_midnight(alert: Alert) -> bool:
        return alert.phone_or_sms() and alert.graveyard(end_hour)

    def email(alert: Alert) -> bool:
        return alert.email()

    def by_resolver(incident: Incident, summary: Counter[Hashable]) -> None:
        if incident.resolved:
            summary[incident.resolver] += 1

    def by_trigger(incident: Incident, summary: Counter[Hashable]) -> None:
        summary[incident.trigger_name] += 1

    def by_person(
        predicate: Callable[[Alert], bool],
    ) -> Callable[[Alert, Counter[Hashable]], None]:
        def visit(alert: Alert, summary: Counter[Hashable]) -> None:
            if predicate(alert):
                summary[alert.person] += 1

        return visit

    unresolved = incidents.current_count(lambda i: not i.resolved)
    resolvers = incidents.current_summary(by_resolver)
    triggers = incidents.current_summary(by_trigger)
    sms_or_phone = alerts.current_summary(by_person(phone_or_sms))
    emails = alerts.current_summary(by_person(email))

    lines: list[str] = []
    lines.append(
        f"Rotation report for {_day(period.start, tz)} - {_day(period.end, tz)}:"
    )

    volume = f"  {incidents.current_count()} incidents"
    if unresolved > 0:
        volume += f", {unresolved} unresolved"
    volume += f" ({incidents.pct_change()})"
    lines.extend([volume, ""])

    resolutions: list[str] = []
    for name, count in resolvers.items():
        level = escalation.level_for_person(str(name))
        if level in config.important_levels:
            label = escalation.label_for_person(str(name))
            resolutions.append(f"{name} ({label}): {count}")
        else:
            resolutions.append(f"{name}: {count}")
    lines.extend(["Resolutions:", "  " + ", ".join(resolutions), ""])

    lines.append(
        f"SMS/Phone Alerts ({alerts.current_count(phone_or_sms)} total, "
        f"{alerts.pct_change(phone_or_sms)}; "
        f"{alerts.current_count(after_midnight)} after midnight, "
        f"{alerts.pct_change(after_midnight)}):"
    )
    lines.extend(["  " + _counts(sms_or_phone), ""])

    lines.append(
        f"Email Alerts ({alerts.current_count(email)} total, "
        f"{alerts.pct_change(email)}):"
    )
    lines.extend(["  " + _counts(emails), ""])

    lines.append("Top triggers:")
    for trigger, count in top_triggers(triggers, config.top_triggers):
        before = incidents.previous_count(lambda i: i.trigger_name == trigger)
        lines.append(f"  {count} '{trigger}' ({pct_change(before, count)})")

    return "\n".join(lines) + "\n"


__all__ = ["build_report", "top_triggers"]
