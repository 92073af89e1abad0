"""Sync result history."""

from .sync_log import DEFAULT_MAX_ENTRIES, SyncLog

__all__ = ["DEFAULT_MAX_ENTRIES", "SyncLog"]
