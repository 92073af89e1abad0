"""Persistent storage of sync profiles."""

from .profile_store import ProfileLoadError, ProfileStore

__all__ = ["ProfileLoadError", "ProfileStore"]
