"""Typed records for incidents and alerts seen during a rotation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

# Alerts sent before this hour (local time) count as graveyard alerts.
GRAVEYARD_END_HOUR = 6


class Channel(str, Enum):
    """Delivery channel of an alert."""

    SMS = "sms"
    PHONE = "phone"
    EMAIL = "email"
    OTHER = "other"


@dataclass(slots=True, frozen=True)
class Incident:
    """An incident opened during the rotation."""

    timestamp: datetime
    resolved: bool
    resolver: str | None
    trigger_name: str

    def __post_init__(self) -> None:
        if self.resolved and not self.resolver:
            raise ValueError("resolved incident has no resolver")


@dataclass(slots=True, frozen=True)
class Alert:
    """A notification sent to an on-call person."""

    timestamp: datetime
    channel: Channel
    person: str

    def channel_is(self, *channels: Channel) -> bool:
        return self.channel in channels

    def phone_or_sms(self) -> bool:
        return self.channel_is(Channel.SMS, Channel.PHONE)

    def email(self) -> bool:
        return self.channel is Channel.EMAIL

    def graveyard(self, end_hour: int = GRAVEYARD_END_HOUR) -> bool:
        """Return ``True`` if the alert fired between midnight and ``end_hour``."""

        return 0 <= self.timestamp.hour < end_hour


Event = Incident | Alert


__all__ = ["GRAVEYARD_END_HOUR", "Alert", "Channel", "Event", "Incident"]
