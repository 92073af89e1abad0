"""Tests for the periodic sync schedule."""

import logging
import xml.etree.ElementTree as ET  # nosec B405
from datetime import datetime, time, timedelta

import pytest

from syncprofile.core.definitions import INT32_MAX
from syncprofile.core.schedule import SyncSchedule

# Wednesday
NOW = datetime(2024, 1, 3, 12, 0, 0)
MONDAY, WEDNESDAY, FRIDAY = 1, 3, 5


class TestDisabledAndEmpty:
    """Schedules that never produce a run."""

    def test_default_schedule_has_no_runs(self):
        """No time and no interval means no scheduled sync."""
        assert SyncSchedule().next_sync_time(None, NOW) is None

    def test_disabled_schedule(self):
        """A disabled schedule returns None regardless of rules."""
        schedule = SyncSchedule(interval=30, enabled=False)
        assert schedule.next_sync_time(None, NOW) is None


class TestIntervalSchedule:
    """Interval based schedules."""

    def test_first_run_is_now(self):
        """Without a previous sync the run is due immediately."""
        assert SyncSchedule(interval=60).next_sync_time(None, NOW) == NOW

    def test_interval_after_last_sync(self):
        """The next run follows the last sync by the interval."""
        last = NOW - timedelta(minutes=20)
        expected = last + timedelta(minutes=60)
        assert SyncSchedule(interval=60).next_sync_time(last, NOW) == expected

    def test_overdue_run_is_now(self):
        """A missed slot is due now, not in the past."""
        last = NOW - timedelta(hours=5)
        assert SyncSchedule(interval=60).next_sync_time(last, NOW) == NOW

    def test_excluded_day_moves_to_next_allowed_day(self):
        """Runs on excluded weekdays move to midnight of the next allowed day."""
        schedule = SyncSchedule(interval=60, days={FRIDAY})
        assert schedule.next_sync_time(None, NOW) == datetime(2024, 1, 5, 0, 0)

    def test_allowed_day_keeps_candidate(self):
        """Runs on allowed weekdays are unchanged."""
        schedule = SyncSchedule(interval=60, days={WEDNESDAY})
        assert schedule.next_sync_time(None, NOW) == NOW


class TestExactTimeSchedule:
    """Exact time of day schedules."""

    def test_later_today(self):
        """The same day is used when the time is still ahead."""
        schedule = SyncSchedule(time_of_day=time(18, 30), days={WEDNESDAY})
        assert schedule.next_sync_time(None, NOW) == datetime(2024, 1, 3, 18, 30)

    def test_next_week_when_passed(self):
        """A passed time on the only allowed day moves a week ahead."""
        schedule = SyncSchedule(time_of_day=time(8, 0), days={WEDNESDAY})
        assert schedule.next_sync_time(None, NOW) == datetime(2024, 1, 10, 8, 0)

    def test_next_allowed_day(self):
        """The first allowed day after today is chosen."""
        schedule = SyncSchedule(time_of_day=time(8, 0), days={MONDAY, FRIDAY})
        assert schedule.next_sync_time(None, NOW) == datetime(2024, 1, 5, 8, 0)

    def test_one_shot_pending(self):
        """Without days the schedule runs once at the given time."""
        schedule = SyncSchedule(time_of_day=time(18, 0))
        assert schedule.next_sync_time(None, NOW) == datetime(2024, 1, 3, 18, 0)

    def test_one_shot_already_executed(self):
        """A one-shot schedule that already ran has no next run."""
        schedule = SyncSchedule(time_of_day=time(9, 0))
        last = datetime(2024, 1, 3, 9, 1)
        assert schedule.next_sync_time(last, NOW) is None


class TestScheduleValue:
    """Copy and equality."""

    def test_copy_is_equal_and_independent(self):
        """A copy compares equal but does not share the day set."""
        schedule = SyncSchedule(time(6, 0), 0, {MONDAY})
        duplicate = schedule.copy()
        assert duplicate == schedule
        duplicate.days.add(FRIDAY)
        assert schedule.days == {MONDAY}
        assert duplicate != schedule

    def test_invalid_days_are_ignored(self):
        """Only ISO weekdays are kept."""
        assert SyncSchedule(days=[0, 1, 7, 8]).days == {1, 7}


class TestScheduleXml:
    """XML conversion."""

    def test_default_schedule_is_serialized(self):
        """Even the default schedule produces an element."""
        element = SyncSchedule().to_xml()
        assert element.tag == "schedule"
        assert element.get("enabled") == "true"
        assert element.get("interval") == "0"
        assert element.get("time") is None

    @pytest.mark.parametrize(
        "schedule",
        [
            SyncSchedule(),
            SyncSchedule(interval=45, days={1, 2, 3}),
            SyncSchedule(time_of_day=time(7, 15, 30), days={6, 7}),
            SyncSchedule(interval=10, enabled=False),
        ],
    )
    def test_round_trip(self, schedule):
        """Parsing the serialized element yields an equal schedule."""
        assert SyncSchedule.from_xml(schedule.to_xml()) == schedule

    def test_invalid_attributes_keep_defaults(self, caplog):
        """Bad values are ignored with a warning."""
        element = ET.fromstring(
            '<schedule time="25:99" interval="often" days="1,x,9,3"/>'
        )
        with caplog.at_level(logging.WARNING):
            schedule = SyncSchedule.from_xml(element)

        assert schedule.time is None
        assert schedule.interval == 0
        assert schedule.days == {1, 3}
        assert "invalid schedule time" in caplog.text
        assert "invalid schedule interval" in caplog.text
        assert "invalid schedule day 'x'" in caplog.text

    @pytest.mark.parametrize("interval", ["99999999999", "2147483648", "1_000"])
    def test_out_of_range_interval_ignored(self, caplog, interval):
        """Intervals beyond the 32-bit range are ignored with a warning."""
        element = ET.fromstring(f'<schedule interval="{interval}"/>')
        with caplog.at_level(logging.WARNING):
            schedule = SyncSchedule.from_xml(element)

        assert schedule.interval == 0
        assert schedule.next_sync_time(NOW - timedelta(days=1), NOW) is None
        assert "invalid schedule interval" in caplog.text

    def test_constructor_caps_interval(self):
        """A directly given interval is capped so next runs stay computable."""
        schedule = SyncSchedule(interval=2**40)
        assert schedule.interval == INT32_MAX
        last = NOW - timedelta(days=1)
        assert schedule.next_sync_time(last, NOW) == last + timedelta(
            minutes=INT32_MAX
        )
