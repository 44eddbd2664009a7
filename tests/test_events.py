from datetime import UTC, datetime

import pytest

from rotation_report.events import Alert, Channel, Incident


def _alert(channel: Channel, hour: int = 12) -> Alert:
    return Alert(datetime(2024, 3, 4, hour, 30, tzinfo=UTC), channel, "alice")


def test_resolved_incident_requires_resolver() -> None:
    with pytest.raises(ValueError):
        Incident(datetime(2024, 3, 4, tzinfo=UTC), True, None, "Disk full")


def test_open_incident_without_resolver() -> None:
    incident = Incident(datetime(2024, 3, 4, tzinfo=UTC), False, None, "Disk full")
    assert not incident.resolved
    assert incident.resolver is None


@pytest.mark.parametrize(
    "channel,phone_or_sms,email",
    [
        (Channel.SMS, True, False),
        (Channel.PHONE, True, False),
        (Channel.EMAIL, False, True),
        (Channel.OTHER, False, False),
    ],
)
def test_channel_predicates(channel: Channel, phone_or_sms: bool, email: bool) -> None:
    alert = _alert(channel)
    assert alert.phone_or_sms() is phone_or_sms
    assert alert.email() is email
    assert alert.channel_is(channel)


def test_graveyard_window() -> None:
    assert _alert(Channel.SMS, hour=0).graveyard()
    assert _alert(Channel.SMS, hour=5).graveyard()
    assert not _alert(Channel.SMS, hour=6).graveyard()
    assert not _alert(Channel.SMS, hour=23).graveyard()


def test_graveyard_custom_cutoff() -> None:
    assert _alert(Channel.PHONE, hour=6).graveyard(end_hour=7)
    assert not _alert(Channel.PHONE, hour=0).graveyard(end_hour=0)
