from __future__ import annotations

from conftest import FakeClock

from staffboard.models.view import NotificationLevel
from staffboard.services.notifications import DEFAULT_TTL_SECONDS, NotificationCenter


def test_default_ttl_is_five_seconds():
    assert DEFAULT_TTL_SECONDS == 5.0
    assert NotificationCenter().ttl_seconds == 5.0


def test_levels_and_ids():
    center = NotificationCenter(clock=FakeClock())
    first = center.success("saved")
    second = center.error("failed")
    third = center.warning("check input")

    assert (first.level, second.level, third.level) == (
        NotificationLevel.SUCCESS,
        NotificationLevel.ERROR,
        NotificationLevel.WARNING,
    )
    assert first.id < second.id < third.id
    assert [n.message for n in center.active()] == ["saved", "failed", "check input"]


def test_notifications_expire_after_ttl():
    clock = FakeClock(now=10.0)
    center = NotificationCenter(ttl_seconds=5.0, clock=clock)
    center.success("saved")

    clock.advance(5.0)
    assert center.active() == []


def test_dismiss_before_expiry():
    center = NotificationCenter(clock=FakeClock())
    kept = center.success("kept")
    dropped = center.success("dropped")

    assert center.dismiss(dropped.id) is True
    assert center.dismiss(dropped.id) is False
    assert [n.id for n in center.active()] == [kept.id]


def test_clear():
    center = NotificationCenter(clock=FakeClock())
    center.error("x")
    center.clear()
    assert center.active() == []
