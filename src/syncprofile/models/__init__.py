"""Models for the sync profile package."""

from .models import SyncResultCode, SyncResults

__all__ = [
    "SyncResultCode",
    "SyncResults",
]
