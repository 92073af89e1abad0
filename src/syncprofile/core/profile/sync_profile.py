"""Sync profile aggregate.

A sync profile combines the generic profile tree with the settings that decide
when a sync runs: the sync type, the periodic schedule, the retry policy and
the history of previous results.
"""

import logging
import xml.etree.ElementTree as ET  # nosec B405 - trusted local profile files
from datetime import datetime
from typing import Callable, List, Optional

from ...models import SyncResults
from ..log import SyncLog
from ..schedule import SyncSchedule
from .config_resolver import (
    ConfigResolver,
    ConflictResolutionPolicy,
    DestinationType,
    SyncDirection,
    SyncType,
)
from .profile import Profile, ProfileType
from .retry_policy import RetryPolicy
from .schedule_resolver import ScheduleResolver

logger = logging.getLogger(__name__)


class SyncProfile(Profile):
    """Profile describing when and how a synchronization task runs."""

    def __init__(self, name: str = "", clock: Callable[[], datetime] = datetime.now):
        """Initialize an empty sync profile.

        Args:
            name: Profile name
            clock: Source of the current time used for retry scheduling
        """
        super().__init__(name, ProfileType.SYNC)
        self.retry_policy = RetryPolicy()
        self.clock = clock
        self._schedule = SyncSchedule()
        self._log: Optional[SyncLog] = None
        self._config = ConfigResolver(self)

    # Copy and XML

    def clone(self) -> "SyncProfile":
        """Return an independent copy.

        Sub-profiles and keys are deep-copied, the schedule and retry policy
        are copied by value and the log, if any, is duplicated.
        """
        duplicate = SyncProfile(self.name(), self.clock)
        duplicate._keys = dict(self._keys)
        duplicate._sub_profiles = [child.clone() for child in self._sub_profiles]
        duplicate._schedule = self._schedule.copy()
        duplicate.retry_policy = self.retry_policy.copy()
        if self._log is not None:
            duplicate._log = self._log.copy()
        return duplicate

    @classmethod
    def from_xml(cls, element: ET.Element) -> "SyncProfile":
        """Parse a sync profile from its ``<profile>`` element."""
        from .serializer import ProfileSerializer

        return ProfileSerializer().deserialize(element)

    def base_xml(self) -> ET.Element:
        """Serialize only the generic keys and sub-profiles."""
        return super().to_xml()

    def to_xml(self) -> ET.Element:
        """Serialize the profile including schedule and retry settings."""
        from .serializer import ProfileSerializer

        return ProfileSerializer().serialize(self)

    # Name and log

    def set_name(self, name: str) -> None:
        """Rename the profile and its log."""
        super().set_name(name)
        if self._log is not None:
            self._log.set_profile_name(name)

    def log(self) -> Optional[SyncLog]:
        """Return the result history, if any result has been recorded."""
        return self._log

    def set_log(self, log: Optional[SyncLog]) -> None:
        """Replace the result history."""
        self._log = log

    def add_results(self, results: SyncResults) -> None:
        """Record the outcome of a sync session."""
        if self._log is None:
            self._log = SyncLog(self.name())
        self._log.add_results(results)

    def last_results(self) -> Optional[SyncResults]:
        """Return the most recent sync result."""
        if self._log is None:
            return None
        return self._log.last_results()

    def last_sync_time(self) -> Optional[datetime]:
        """Return the time of the most recent sync, if there was one."""
        results = self.last_results()
        return results.sync_time if results is not None else None

    # Scheduling

    def sync_type(self) -> SyncType:
        """Return whether the profile syncs on a schedule or manually."""
        return self._config.resolve_sync_type()

    def set_sync_type(self, sync_type: SyncType) -> None:
        """Set whether the profile syncs on a schedule or manually."""
        self._config.set_sync_type(sync_type)

    def sync_schedule(self) -> SyncSchedule:
        """Return a copy of the periodic schedule."""
        return self._schedule.copy()

    def set_sync_schedule(self, schedule: SyncSchedule) -> None:
        """Replace the periodic schedule."""
        self._schedule = schedule.copy()

    def next_sync_time(self) -> Optional[datetime]:
        """Return when this profile should sync next, or None."""
        resolver = ScheduleResolver(
            self._config, self.retry_policy, self._schedule, self.clock
        )
        return resolver.next_sync_time(self.last_sync_time())

    # Retry attempts

    def retry_attempts_count(self) -> int:
        """Number of attempts, including the first one."""
        return self.retry_policy.attempt_count()

    def current_attempt(self) -> int:
        """Index of the current attempt."""
        return self.retry_policy.current_attempt

    def retry_delay(self, attempt: int) -> int:
        """Delay in minutes before the given attempt, or -1 if out of range."""
        return self.retry_policy.delay_for_attempt(attempt)

    def set_retry_attempt(self, attempt: int) -> None:
        self.retry_policy.set_attempt(attempt)

    def need_next_attempt(self) -> bool:
        return self.retry_policy.has_more_attempts()

    def set_next_attempt(self) -> None:
        self.retry_policy.advance()

    def reset_attempts(self) -> None:
        self.retry_policy.reset()

    def set_retry_delays(self, delays: List[int]) -> None:
        """Replace the explicit retry delays, keeping the attempt counter."""
        policy = RetryPolicy.from_delays(delays)
        policy.current_attempt = self.retry_policy.current_attempt
        self.retry_policy = policy

    # Sub-profiles and typed settings

    def service_name(self) -> str:
        """Return the name of the service sub-profile, or ''."""
        return self._config.resolve_service_name()

    def service_profile(self) -> Optional[Profile]:
        return self._config.resolve_sub_profile(ProfileType.SERVICE)

    def client_profile(self) -> Optional[Profile]:
        return self._config.resolve_sub_profile(ProfileType.CLIENT)

    def server_profile(self) -> Optional[Profile]:
        return self._config.resolve_sub_profile(ProfileType.SERVER)

    def storage_profiles(self) -> List[Profile]:
        return self._config.resolve_storage_profiles()

    def storage_backend_names(self) -> List[str]:
        """Return backend names of the enabled storage sub-profiles."""
        return self._config.resolve_enabled_backend_names()

    def destination_type(self) -> DestinationType:
        return self._config.resolve_destination_type()

    def sync_direction(self) -> SyncDirection:
        return self._config.resolve_direction()

    def set_sync_direction(self, direction: SyncDirection) -> None:
        self._config.set_direction(direction)

    def conflict_resolution_policy(self) -> ConflictResolutionPolicy:
        return self._config.resolve_conflict_policy()

    def set_conflict_resolution_policy(self, policy: ConflictResolutionPolicy) -> None:
        self._config.set_conflict_policy(policy)

    def sync_on_change_after(self) -> int:
        """Return the sync-on-change delay, or SYNC_ON_CHANGE_UNSET."""
        return self._config.resolve_sync_on_change_delay()
