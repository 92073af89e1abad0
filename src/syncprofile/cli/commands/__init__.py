"""CLI command modules."""

from .profile import (
    backends_command,
    list_command,
    make_store,
    next_run_command,
    set_direction_command,
    set_retries_command,
    show_command,
)

__all__ = [
    "backends_command",
    "list_command",
    "make_store",
    "next_run_command",
    "set_direction_command",
    "set_retries_command",
    "show_command",
]
