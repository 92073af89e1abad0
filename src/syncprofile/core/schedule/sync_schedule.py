"""Periodic sync schedule.

A schedule runs either at an exact time of day on selected weekdays, or at a
fixed interval after the previous sync. A schedule with an exact time but no
weekdays is one-shot: it fires once and then reports no further runs.
"""

import logging
import xml.etree.ElementTree as ET  # nosec B405 - trusted local profile files
from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional, Set

from ..definitions import (
    ATTR_DAYS,
    ATTR_ENABLED,
    ATTR_INTERVAL,
    ATTR_TIME,
    BOOLEAN_FALSE,
    BOOLEAN_TRUE,
    INT32_MAX,
    TAG_SCHEDULE,
    parse_int,
)

logger = logging.getLogger(__name__)

TIME_FORMAT = "%H:%M:%S"
WEEKDAYS = range(1, 8)


class SyncSchedule:
    """Calendar and interval rules for periodic syncs."""

    def __init__(
        self,
        time_of_day: Optional[time] = None,
        interval: int = 0,
        days: Optional[Iterable[int]] = None,
        enabled: bool = True,
    ):
        """Initialize the schedule.

        Args:
            time_of_day: Exact time of day to sync at
            interval: Minutes between syncs when no exact time is set
            days: ISO weekdays (1 = Monday) on which syncs may run
            enabled: Whether the schedule produces any sync times at all
        """
        self.time = time_of_day
        self.interval = min(max(0, int(interval)), INT32_MAX)
        self.days: Set[int] = {d for d in (days or ()) if d in WEEKDAYS}
        self.enabled = enabled

    def __eq__(self, other: object) -> bool:
        """Schedules are equal when all their rules are equal."""
        if not isinstance(other, SyncSchedule):
            return NotImplemented
        return (
            self.time == other.time
            and self.interval == other.interval
            and self.days == other.days
            and self.enabled == other.enabled
        )

    def __repr__(self) -> str:
        """Representation listing the schedule rules."""
        return (
            f"SyncSchedule(time={self.time}, interval={self.interval}, "
            f"days={sorted(self.days)}, enabled={self.enabled})"
        )

    def copy(self) -> "SyncSchedule":
        """Return an independent copy."""
        return SyncSchedule(self.time, self.interval, self.days, self.enabled)

    def next_sync_time(
        self, last_sync: Optional[datetime], now: Optional[datetime] = None
    ) -> Optional[datetime]:
        """Compute the next scheduled sync.

        Args:
            last_sync: Time of the previous sync, or None if it never ran
            now: Current time, defaults to datetime.now()

        Returns:
            Next sync time, or None if the schedule has no further runs
        """
        if not self.enabled:
            return None

        now = now or datetime.now()

        if self.time is not None:
            if self.days:
                return self._next_exact_time(self.time, now)
            candidate = datetime.combine(now.date(), self.time)
            if last_sync is None or last_sync < candidate:
                return candidate
            return None

        if self.interval > 0:
            if last_sync is None:
                candidate = now
            else:
                candidate = max(last_sync + timedelta(minutes=self.interval), now)
            if self.days and candidate.isoweekday() not in self.days:
                next_day = self._next_allowed_day(candidate.date() + timedelta(days=1))
                candidate = datetime.combine(next_day, time.min)
            return candidate

        return None

    def _next_exact_time(
        self, time_of_day: time, now: datetime
    ) -> Optional[datetime]:
        for offset in range(8):
            day = now.date() + timedelta(days=offset)
            candidate = datetime.combine(day, time_of_day)
            if day.isoweekday() in self.days and candidate > now:
                return candidate
        return None

    def _next_allowed_day(self, start: date) -> date:
        day = start
        while day.isoweekday() not in self.days:
            day += timedelta(days=1)
        return day

    @classmethod
    def from_xml(cls, element: ET.Element) -> "SyncSchedule":
        """Parse a ``<schedule>`` element. Invalid attributes keep defaults."""
        schedule = cls()
        schedule.enabled = element.get(ATTR_ENABLED, BOOLEAN_TRUE).lower() == BOOLEAN_TRUE

        time_str = element.get(ATTR_TIME)
        if time_str:
            try:
                schedule.time = datetime.strptime(time_str, TIME_FORMAT).time()
            except ValueError:
                logger.warning("Ignoring invalid schedule time '%s'", time_str)

        interval_str = element.get(ATTR_INTERVAL)
        if interval_str:
            interval = parse_int(interval_str)
            if interval is None:
                logger.warning("Ignoring invalid schedule interval '%s'", interval_str)
            else:
                schedule.interval = max(0, interval)

        days_str = element.get(ATTR_DAYS)
        if days_str:
            for part in days_str.split(","):
                day = parse_int(part)
                if day is None:
                    logger.warning("Ignoring invalid schedule day '%s'", part)
                elif day in WEEKDAYS:
                    schedule.days.add(day)

        return schedule

    def to_xml(self) -> ET.Element:
        """Serialize to a ``<schedule>`` element, also for the default schedule."""
        element = ET.Element(TAG_SCHEDULE)
        element.set(ATTR_ENABLED, BOOLEAN_TRUE if self.enabled else BOOLEAN_FALSE)
        if self.time is not None:
            element.set(ATTR_TIME, self.time.strftime(TIME_FORMAT))
        element.set(ATTR_INTERVAL, str(self.interval))
        if self.days:
            element.set(ATTR_DAYS, ",".join(str(d) for d in sorted(self.days)))
        return element
