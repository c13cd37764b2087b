#!filepath: tests/session/test_clock_session.py
import pytest

from wallclock.core.types import Instant
from wallclock.session.clock_session import ClockSession
from wallclock.utils.errors import InvalidZoneError, WallTimeError

utc = Instant.from_utc_fields

START = utc(2024, 7, 15, 12, 0)


@pytest.fixture
def session(resolver) -> ClockSession:
    return ClockSession(resolver=resolver, source_zone="America/New_York", instant=START)


def test_live_session_follows_tick(session):
    later = START.shift_seconds(1)
    session.tick(later)
    assert session.instant == later


def test_select_time_pauses_and_resolves(session):
    session.select_time("17:00")

    assert session.is_live is False
    assert session.instant == utc(2024, 7, 15, 21, 0)
    assert session.source_time_value() == "17:00"


def test_paused_session_ignores_tick(session):
    session.select_time("17:00")
    session.tick(START.shift_minutes(30))
    assert session.instant == utc(2024, 7, 15, 21, 0)


def test_change_zone_while_paused_keeps_wall_time(session):
    """
    Contract:
    暂停状态下切换时区 → 钟面读数不变，instant 改变
    """
    session.select_time("17:00")
    session.change_zone("Asia/Tokyo")

    assert session.source_zone == "Asia/Tokyo"
    assert session.source_time_value() == "17:00"
    assert session.instant == utc(2024, 7, 15, 8, 0)


def test_change_zone_while_live_jumps_to_now(session):
    now = utc(2024, 7, 15, 12, 0, 5)
    session.change_zone("Europe/London", now=now)

    assert session.source_zone == "Europe/London"
    assert session.instant == now
    assert session.is_live is True


def test_change_zone_invalid_keeps_old_zone(session):
    session.select_time("17:00")
    with pytest.raises(InvalidZoneError):
        session.change_zone("Nowhere/Else")
    assert session.source_zone == "America/New_York"


def test_select_bad_time_leaves_state_alone(session):
    with pytest.raises(WallTimeError):
        session.select_time("25:61")
    assert session.is_live is True
    assert session.instant == START


def test_toggle_and_reset(session):
    assert session.toggle_live() is False
    assert session.toggle_live() is True

    session.select_time("08:00")
    now = utc(2024, 7, 16, 0, 0)
    session.reset(now)
    assert session.is_live is True
    assert session.instant == now


def test_local_display(session):
    session.select_time("17:00")
    assert session.local_display("UTC") == ("21:00:00", None, "Monday, July 15, 2024")

    session.set_hour12(True)
    assert session.local_display("UTC") == ("9:00:00", "PM", "Monday, July 15, 2024")
