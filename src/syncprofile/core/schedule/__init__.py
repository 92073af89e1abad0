"""Periodic schedule calculation."""

from .sync_schedule import SyncSchedule

__all__ = ["SyncSchedule"]
