"""End-of-shift reports for an on-call rotation."""

from .periods import TimePeriod
from .summary import PeriodSummary, pct_change

__all__ = ["PeriodSummary", "TimePeriod", "pct_change"]
