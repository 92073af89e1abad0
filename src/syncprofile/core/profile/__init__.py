"""Sync profile model, scheduling and configuration resolution."""

from .config_resolver import (
    SYNC_ON_CHANGE_UNSET,
    ConfigResolver,
    ConflictResolutionPolicy,
    DestinationType,
    SyncDirection,
    SyncType,
)
from .profile import Profile, ProfileError, ProfileType
from .retry_policy import INVALID_DELAY, RetryPolicy
from .schedule_resolver import ScheduleResolver
from .serializer import ProfileSerializer
from .sync_profile import SyncProfile

__all__ = [
    # Generic profile tree
    "Profile",
    "ProfileError",
    "ProfileType",
    # Settings
    "ConfigResolver",
    "ConflictResolutionPolicy",
    "DestinationType",
    "SyncDirection",
    "SyncType",
    "SYNC_ON_CHANGE_UNSET",
    # Retry and scheduling
    "INVALID_DELAY",
    "RetryPolicy",
    "ScheduleResolver",
    # Aggregate
    "ProfileSerializer",
    "SyncProfile",
]
