"""Typed settings resolved from a profile's sub-profile tree.

Sync profiles store their client, server, service and storage configuration
as untyped child profiles. This module finds the relevant child and maps its
string keys to enums and numbers. Unknown or missing values never raise; they
resolve to the ``UNDEFINED`` member or the unset sentinel.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional

from ..definitions import (
    KEY_BACKEND,
    KEY_CONFLICT_RESOLUTION_POLICY,
    KEY_DESTINATION_TYPE,
    KEY_SOC_AFTER,
    KEY_SYNC_DIRECTION,
    KEY_SYNC_SCHEDULED,
    VALUE_DEVICE,
    VALUE_FROM_REMOTE,
    VALUE_ONLINE,
    VALUE_PREFER_LOCAL,
    VALUE_PREFER_REMOTE,
    VALUE_TO_REMOTE,
    VALUE_TWO_WAY,
    parse_int,
)
from .profile import Profile, ProfileType

logger = logging.getLogger(__name__)

# Largest unsigned 32-bit value, returned when no sync-on-change delay is set
SYNC_ON_CHANGE_UNSET = 0xFFFFFFFF


class SyncType(str, Enum):
    """How a sync is triggered."""

    MANUAL = "manual"
    SCHEDULED = "scheduled"


class SyncDirection(str, Enum):
    """Direction in which data flows during a sync."""

    UNDEFINED = "undefined"
    TWO_WAY = "two_way"
    FROM_REMOTE = "from_remote"
    TO_REMOTE = "to_remote"


class ConflictResolutionPolicy(str, Enum):
    """Which side wins when both sides changed the same item."""

    UNDEFINED = "undefined"
    PREFER_REMOTE_CHANGES = "prefer_remote_changes"
    PREFER_LOCAL_CHANGES = "prefer_local_changes"


class DestinationType(str, Enum):
    """Whether the sync target is an online service or a local device."""

    UNDEFINED = "undefined"
    ONLINE = "online"
    DEVICE = "device"


_DIRECTION_VALUES: Dict[str, SyncDirection] = {
    VALUE_TWO_WAY: SyncDirection.TWO_WAY,
    VALUE_FROM_REMOTE: SyncDirection.FROM_REMOTE,
    VALUE_TO_REMOTE: SyncDirection.TO_REMOTE,
}

_POLICY_VALUES: Dict[str, ConflictResolutionPolicy] = {
    VALUE_PREFER_REMOTE: ConflictResolutionPolicy.PREFER_REMOTE_CHANGES,
    VALUE_PREFER_LOCAL: ConflictResolutionPolicy.PREFER_LOCAL_CHANGES,
}

_DESTINATION_VALUES: Dict[str, DestinationType] = {
    VALUE_ONLINE: DestinationType.ONLINE,
    VALUE_DEVICE: DestinationType.DEVICE,
}


def _inverse(table: Dict[str, Enum]) -> Dict[Enum, str]:
    return {member: value for value, member in table.items()}


class ConfigResolver:
    """Resolves typed sync settings from a profile and its sub-profiles."""

    def __init__(self, profile: Profile):
        """Initialize the resolver.

        Args:
            profile: Root profile whose sub-profile tree is searched
        """
        self.profile = profile

    # Sub-profile lookup

    def resolve_sub_profile(self, kind: ProfileType) -> Optional[Profile]:
        """Return the first sub-profile of the given type, or None.

        Args:
            kind: One of SERVICE, CLIENT or SERVER

        Returns:
            First matching sub-profile in depth-first document order
        """
        for sub_profile in self.profile.all_sub_profiles():
            if sub_profile.type() == kind:
                return sub_profile
        return None

    def resolve_storage_profiles(self) -> List[Profile]:
        """Return every storage sub-profile in document order."""
        return [
            p for p in self.profile.all_sub_profiles() if p.type() == ProfileType.STORAGE
        ]

    def resolve_service_name(self) -> str:
        """Return the name of the first service sub-profile, or ''."""
        names = self.profile.sub_profile_names(ProfileType.SERVICE)
        return names[0] if names else ""

    def resolve_enabled_backend_names(self) -> List[str]:
        """Return backend names of all enabled storage sub-profiles.

        The ``backend`` key is used when present, otherwise the storage
        profile's own name. Duplicates are kept.
        """
        backends = []
        for storage in self.resolve_storage_profiles():
            if storage.is_enabled():
                backends.append(storage.key(KEY_BACKEND) or storage.name())
        return backends

    # Sync type

    def resolve_sync_type(self) -> SyncType:
        """Return SCHEDULED if the profile has the scheduled flag set."""
        if self.profile.bool_key(KEY_SYNC_SCHEDULED):
            return SyncType.SCHEDULED
        return SyncType.MANUAL

    def set_sync_type(self, sync_type: SyncType) -> None:
        """Persist the sync type as the scheduled flag."""
        self.profile.set_bool_key(KEY_SYNC_SCHEDULED, sync_type == SyncType.SCHEDULED)

    # Enum-valued settings

    def _client_key(self, key: str) -> str:
        client = self.resolve_sub_profile(ProfileType.CLIENT)
        if client is None:
            return ""
        return client.key(key, "") or ""

    def resolve_direction(self) -> SyncDirection:
        """Return the sync direction configured on the client sub-profile."""
        value = self._client_key(KEY_SYNC_DIRECTION)
        return _DIRECTION_VALUES.get(value, SyncDirection.UNDEFINED)

    def resolve_conflict_policy(self) -> ConflictResolutionPolicy:
        """Return the conflict policy configured on the client sub-profile."""
        value = self._client_key(KEY_CONFLICT_RESOLUTION_POLICY)
        return _POLICY_VALUES.get(value, ConflictResolutionPolicy.UNDEFINED)

    def resolve_destination_type(self) -> DestinationType:
        """Return the destination type configured on the service sub-profile."""
        service = self.resolve_sub_profile(ProfileType.SERVICE)
        value = service.key(KEY_DESTINATION_TYPE, "") if service is not None else ""
        return _DESTINATION_VALUES.get(value or "", DestinationType.UNDEFINED)

    def set_direction(self, direction: SyncDirection) -> None:
        """Write the sync direction to the client sub-profile.

        UNDEFINED removes the key. Without a client sub-profile nothing is
        written and a warning is logged.
        """
        self._set_client_key(
            KEY_SYNC_DIRECTION,
            _inverse(_DIRECTION_VALUES).get(direction),
            "sync direction",
        )

    def set_conflict_policy(self, policy: ConflictResolutionPolicy) -> None:
        """Write the conflict resolution policy to the client sub-profile."""
        self._set_client_key(
            KEY_CONFLICT_RESOLUTION_POLICY,
            _inverse(_POLICY_VALUES).get(policy),
            "conflict resolution policy",
        )

    def _set_client_key(self, key: str, value: Optional[str], setting: str) -> None:
        client = self.resolve_sub_profile(ProfileType.CLIENT)
        if client is None:
            logger.warning(
                "Profile '%s' has no client profile, failed to set %s",
                self.profile.name(),
                setting,
            )
            return
        client.set_key(key, value)

    # Numeric settings

    def resolve_sync_on_change_delay(self) -> int:
        """Return the sync-on-change delay from the client sub-profile.

        Returns:
            The delay, or SYNC_ON_CHANGE_UNSET when the key is missing, empty
            or not an unsigned 32-bit integer
        """
        delay = SYNC_ON_CHANGE_UNSET
        value = self._client_key(KEY_SOC_AFTER)
        parsed = parse_int(value, maximum=SYNC_ON_CHANGE_UNSET)
        if parsed is not None and 0 <= parsed < SYNC_ON_CHANGE_UNSET:
            delay = parsed
        logger.debug("Sync on change after time from profile: %d", delay)
        return delay
