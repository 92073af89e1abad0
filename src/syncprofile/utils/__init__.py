"""Utility helpers."""

from .logging_config import set_log_level, setup_logging

__all__ = ["set_log_level", "setup_logging"]
