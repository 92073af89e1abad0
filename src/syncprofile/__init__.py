"""Sync profile scheduling and configuration.

Sync profiles describe when a synchronization task runs, how it retries
after failures and which client, server, service and storage components take
part in it.
"""

__version__ = "1.0.0"

from .config import Config
from .core.log import SyncLog
from .core.profile import (
    ConfigResolver,
    ConflictResolutionPolicy,
    DestinationType,
    Profile,
    ProfileError,
    ProfileSerializer,
    ProfileType,
    RetryPolicy,
    ScheduleResolver,
    SyncDirection,
    SyncProfile,
    SyncType,
)
from .core.schedule import SyncSchedule
from .models import SyncResultCode, SyncResults
from .storage import ProfileLoadError, ProfileStore

__all__ = [
    "Config",
    "ConfigResolver",
    "ConflictResolutionPolicy",
    "DestinationType",
    "Profile",
    "ProfileError",
    "ProfileLoadError",
    "ProfileSerializer",
    "ProfileStore",
    "ProfileType",
    "RetryPolicy",
    "ScheduleResolver",
    "SyncDirection",
    "SyncLog",
    "SyncProfile",
    "SyncResultCode",
    "SyncResults",
    "SyncSchedule",
    "SyncType",
]
