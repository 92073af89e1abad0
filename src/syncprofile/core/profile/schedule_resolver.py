"""Next-run computation for sync profiles.

While a retry sequence is in progress (``current_attempt > 0``) the retry
backoff decides the next run and the periodic schedule is ignored. Otherwise
scheduled profiles follow their periodic schedule and manual profiles have no
next run.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..schedule import SyncSchedule
from .config_resolver import ConfigResolver, SyncType
from .retry_policy import RetryPolicy

logger = logging.getLogger(__name__)


class ScheduleResolver:
    """Chooses between the periodic schedule and retry backoff."""

    def __init__(
        self,
        config: ConfigResolver,
        retry_policy: RetryPolicy,
        schedule: SyncSchedule,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the resolver.

        Args:
            config: Resolver providing the profile's sync type
            retry_policy: Retry state of the profile
            schedule: Periodic schedule of the profile
            clock: Source of the current time
        """
        self.config = config
        self.retry_policy = retry_policy
        self.schedule = schedule
        self.clock = clock

    def next_sync_time(self, last_sync_time: Optional[datetime]) -> Optional[datetime]:
        """Return when the profile should sync next.

        Args:
            last_sync_time: Time of the most recent sync, if any

        Returns:
            Next sync time, or None when no next sync is known
        """
        attempt = self.retry_policy.current_attempt

        if self.config.resolve_sync_type() == SyncType.SCHEDULED and attempt == 0:
            return self.schedule.next_sync_time(last_sync_time, self.clock())

        if attempt <= 0 or not self.retry_policy.has_more_attempts():
            return None

        delay = self.retry_policy.delay_for_attempt(attempt)
        logger.debug(
            "Retry attempt %d of profile '%s' due in %d minutes",
            attempt,
            self.config.profile.name(),
            delay,
        )
        return self.clock() + timedelta(minutes=delay)
