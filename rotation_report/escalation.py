"""Escalation levels, on-call people and the shift schedule."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import timedelta

from .contracts import OnCallRecord
from .periods import ONE_WEEK, TimePeriod

LOGGER = logging.getLogger(__name__)


class ScheduleError(RuntimeError):
    """Raised when the reporting periods cannot be derived."""


class LevelNotFound(ScheduleError):
    """Raised when nobody is on call at the requested level."""


class ScheduleNotFound(ScheduleError):
    """Raised when the requested level has no bounded shift."""


@dataclass(slots=True, frozen=True)
class OnCall:
    """One person on call at one escalation level."""

    level: int
    person: str
    label: str
    shift: TimePeriod | None = None


def _label(record: OnCallRecord) -> str:
    if record.schedule is not None:
        return record.schedule.summary
    if record.escalation_policy is not None:
        return record.escalation_policy.summary
    return f"Level {record.escalation_level}"


class Escalation:
    """Lookup of labels and levels for the people currently on call."""

    def __init__(
        self,
        oncalls: Iterable[OnCall],
        level_labels: Mapping[int, str] | None = None,
    ) -> None:
        self.oncalls = sorted(oncalls, key=lambda o: o.level)
        self.level_labels = dict(level_labels or {})

    @classmethod
    def from_records(
        cls,
        records: Iterable[OnCallRecord],
        level_labels: Mapping[int, str] | None = None,
    ) -> Escalation:
        oncalls: list[OnCall] = []
        for record in records:
            shift = None
            if record.start is not None and record.end is not None:
                shift = TimePeriod(record.start, record.end)
            oncalls.append(
                OnCall(
                    level=record.escalation_level,
                    person=record.user.summary,
                    label=_label(record),
                    shift=shift,
                )
            )
        LOGGER.debug("escalation has %d on-call entries", len(oncalls))
        return cls(oncalls, level_labels)

    def at_level(self, level: int) -> list[OnCall]:
        return [o for o in self.oncalls if o.level == level]

    def label_for_level(self, level: int) -> str | None:
        if level in self.level_labels:
            return self.level_labels[level]
        for oncall in self.at_level(level):
            return oncall.label
        return None

    def level_for_person(self, person: str) -> int | None:
        """Return the highest-ranked level ``person`` is on call at."""

        for oncall in self.oncalls:
            if oncall.person == person:
                return oncall.level
        return None

    def label_for_person(self, person: str) -> str | None:
        level = self.level_for_person(person)
        if level is None:
            return None
        return self.label_for_level(level)

    def shift_for_level(self, level: int) -> TimePeriod | None:
        for oncall in self.at_level(level):
            if oncall.shift is not None:
                return oncall.shift
        return None


def resolve_periods(
    escalation: Escalation,
    level: int = 1,
    offset: timedelta = ONE_WEEK,
) -> tuple[TimePeriod, TimePeriod]:
    """Return the current shift at ``level`` and the shift ``offset`` earlier.

    Shifts last a day or a week. With the default one-week offset the
    comparison period is the previous week for a week shift and the same
    weekday a week ago for a day shift.
    """

    label = escalation.label_for_level(level)
    if not escalation.at_level(level) or label is None:
        raise LevelNotFound(f"Couldn't find the level {level} rotation on call.")
    current = escalation.shift_for_level(level)
    if current is None:
        raise ScheduleNotFound(f"Couldn't find the rotation schedule for level {label}.")
    previous = current.shifted(-offset)
    LOGGER.debug("current period %s, previous period %s", current, previous)
    return current, previous


__all__ = [
    "Escalation",
    "LevelNotFound",
    "OnCall",
    "ScheduleError",
    "ScheduleNotFound",
    "resolve_periods",
]
