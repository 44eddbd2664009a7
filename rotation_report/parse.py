"""Convert raw on-call service records into rotation events."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, tzinfo
from typing import Any, TypeVar

from pydantic import ValidationError

from .contracts import IncidentRecord, NotificationRecord, OnCallRecord
from .events import Alert, Channel, Incident

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

_CHANNELS = {
    "sms_notification": Channel.SMS,
    "phone_notification": Channel.PHONE,
    "email_notification": Channel.EMAIL,
}


class ParseError(ValueError):
    """Raised when a raw record cannot be turned into an event."""


def _localize(moment: datetime, tz: tzinfo | None) -> datetime:
    return moment.astimezone(tz) if tz is not None else moment


def parse_oncall(data: Any) -> OnCallRecord:
    try:
        return OnCallRecord.model_validate(data)
    except ValidationError as exc:
        raise ParseError("on-call entry does not match schema") from exc


def parse_incident(data: Any, tz: tzinfo | None = None) -> Incident:
    """Parse ``data`` into an :class:`Incident`.

    The trigger name is the incident title. A resolved incident is credited to
    whoever made its last status change.
    """

    try:
        record = IncidentRecord.model_validate(data)
    except ValidationError as exc:
        raise ParseError("incident does not match schema") from exc
    resolved = record.status == "resolved"
    resolver = None
    if resolved and record.last_status_change_by is not None:
        resolver = record.last_status_change_by.summary
    try:
        return Incident(
            timestamp=_localize(record.created_at, tz),
            resolved=resolved,
            resolver=resolver,
            trigger_name=record.title,
        )
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


def parse_alert(data: Any, tz: tzinfo | None = None) -> Alert:
    """Parse a notification ``data`` into an :class:`Alert`."""

    try:
        record = NotificationRecord.model_validate(data)
    except ValidationError as exc:
        raise ParseError("notification does not match schema") from exc
    return Alert(
        timestamp=_localize(record.started_at, tz),
        channel=_CHANNELS.get(record.type, Channel.OTHER),
        person=record.user.summary,
    )


def _parse_all(items: Iterable[Any], parser: Callable[[Any], T], kind: str) -> list[T]:
    parsed: list[T] = []
    skipped = 0
    for item in items:
        try:
            parsed.append(parser(item))
        except ParseError as exc:
            skipped += 1
            LOGGER.warning("skipping malformed %s: %s", kind, exc)
            LOGGER.debug("malformed %s: %r", kind, item)
    LOGGER.debug("parsed %d %s(s), skipped %d", len(parsed), kind, skipped)
    return parsed


def parse_oncalls(items: Iterable[Any]) -> list[OnCallRecord]:
    return _parse_all(items, parse_oncall, "on-call entry")


def parse_incidents(items: Iterable[Any], tz: tzinfo | None = None) -> list[Incident]:
    return _parse_all(items, lambda item: parse_incident(item, tz), "incident")


def parse_alerts(items: Iterable[Any], tz: tzinfo | None = None) -> list[Alert]:
    return _parse_all(items, lambda item: parse_alert(item, tz), "notification")


__all__ = [
    "ParseError",
    "parse_alert",
    "parse_alerts",
    "parse_incident",
    "parse_incidents",
    "parse_oncall",
    "parse_oncalls",
]
