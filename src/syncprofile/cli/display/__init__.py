"""CLI display and formatting utilities."""

from .formatters import display_profile_details, display_profile_list, format_time

__all__ = [
    "display_profile_details",
    "display_profile_list",
    "format_time",
]
