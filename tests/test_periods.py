from datetime import UTC, datetime, timedelta

import pytest

from rotation_report.periods import ONE_WEEK, TimePeriod


def _period() -> TimePeriod:
    return TimePeriod(
        datetime(2024, 3, 4, 9, tzinfo=UTC), datetime(2024, 3, 5, 9, tzinfo=UTC)
    )


def test_contains_includes_both_bounds() -> None:
    period = _period()
    assert period.contains(period.start)
    assert period.contains(period.end)
    assert period.contains(datetime(2024, 3, 4, 23, tzinfo=UTC))


def test_contains_excludes_outside() -> None:
    period = _period()
    assert not period.contains(period.start - timedelta(seconds=1))
    assert not period.contains(period.end + timedelta(seconds=1))


def test_start_after_end_rejected() -> None:
    with pytest.raises(ValueError):
        TimePeriod(datetime(2024, 3, 5, tzinfo=UTC), datetime(2024, 3, 4, tzinfo=UTC))


def test_zero_length_period() -> None:
    moment = datetime(2024, 3, 5, tzinfo=UTC)
    assert TimePeriod(moment, moment).contains(moment)


def test_shifted_back_one_week() -> None:
    period = _period()
    previous = period.shifted(-ONE_WEEK)
    assert previous.start == datetime(2024, 2, 26, 9, tzinfo=UTC)
    assert previous.end == datetime(2024, 2, 27, 9, tzinfo=UTC)
    assert period.start == datetime(2024, 3, 4, 9, tzinfo=UTC)


def test_period_is_immutable() -> None:
    period = _period()
    with pytest.raises(AttributeError):
        period.start = datetime(2024, 1, 1, tzinfo=UTC)  # type: ignore[misc]
