"""Time windows used to bucket rotation events."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

ONE_DAY = timedelta(days=1)
ONE_WEEK = ONE_DAY * 7


@dataclass(slots=True, frozen=True)
class TimePeriod:
    """Closed interval between ``start`` and ``end``."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"period start {self.start.isoformat()} is after end "
                f"{self.end.isoformat()}"
            )

    def contains(self, moment: datetime) -> bool:
        """Return ``True`` if ``moment`` lies inside the period, bounds included."""

        return self.start <= moment <= self.end

    def shifted(self, delta: timedelta) -> TimePeriod:
        return TimePeriod(self.start + delta, self.end + delta)


__all__ = ["ONE_DAY", "ONE_WEEK", "TimePeriod"]
