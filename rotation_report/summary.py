"""Compare rotation events between the current and the previous period."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Generic, TypeVar

from .events import Alert, Incident
from .periods import TimePeriod

LOGGER = logging.getLogger(__name__)

E = TypeVar("E", Incident, Alert)

Predicate = Callable[[E], bool]
Visitor = Callable[[E, Counter[Hashable]], None]

NO_CHANGE = "no change"
NEW = "new"


def pct_change(previous: int, current: int) -> str:
    """Return the change from ``previous`` to ``current`` as a signed percentage.

    A previous count of zero never divides: the result is ``NO_CHANGE`` when the
    current count is zero too and ``NEW`` otherwise.
    """

    if previous == 0:
        return NO_CHANGE if current == 0 else NEW
    change = (current - previous) / previous * 100
    return f"{change:+.1f}%"


def _always(event: object) -> bool:
    return True


class PeriodSummary(Generic[E]):
    """Events of one kind bucketed into a current and a previous period.

    Events are classified when queried, not when appended. An event on an
    instant shared by both periods belongs to the current period only; events
    outside both periods are ignored by every query.
    """

    def __init__(self, current_period: TimePeriod, previous_period: TimePeriod) -> None:
        self.current_period = current_period
        self.previous_period = previous_period
        self._events: list[E] = []

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[E]:
        return iter(self._events)

    def append(self, event: E) -> None:
        self._events.append(event)

    def extend(self, events: Iterable[E]) -> None:
        for event in events:
            self.append(event)

    def _in_current(self, event: E) -> bool:
        return self.current_period.contains(event.timestamp)

    def _in_previous(self, event: E) -> bool:
        return not self._in_current(event) and self.previous_period.contains(
            event.timestamp
        )

    def current(self) -> Iterator[E]:
        """Yield events of the current period in insertion order."""

        return (e for e in self._events if self._in_current(e))

    def previous(self) -> Iterator[E]:
        return (e for e in self._events if self._in_previous(e))

    def current_count(self, predicate: Predicate[E] | None = None) -> int:
        check = predicate or _always
        return sum(1 for e in self.current() if check(e))

    def previous_count(self, predicate: Predicate[E] | None = None) -> int:
        check = predicate or _always
        return sum(1 for e in self.previous() if check(e))

    def current_summary(self, visitor: Visitor[E]) -> dict[Hashable, int]:
        """Group current-period events with ``visitor``.

        ``visitor`` receives each event and a counter defaulting to zero and
        increments whichever keys it wants. Keys keep the order in which they
        were first counted.
        """

        summary: Counter[Hashable] = Counter()
        for event in self.current():
            visitor(event, summary)
        LOGGER.debug(
            "grouped current period into %d key(s): %s", len(summary), list(summary)
        )
        return dict(summary)

    def pct_change(self, predicate: Predicate[E] | None = None) -> str:
        return pct_change(self.previous_count(predicate), self.current_count(predicate))


__all__ = ["NEW", "NO_CHANGE", "PeriodSummary", "pct_change"]
