"""Command-line interface for sync profiles.

This is the main entry point that delegates to command modules.
"""

from pathlib import Path
from typing import Any, Optional

import click

from ..config import get_config
from ..utils.logging_config import setup_logging
from .commands import (
    backends_command,
    list_command,
    make_store,
    next_run_command,
    set_direction_command,
    set_retries_command,
    show_command,
)


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set logging level",
)
@click.option("--log-file", type=click.Path(), help="Log to file")
@click.option(
    "--profile-dir",
    type=click.Path(file_okay=False),
    help="Directory containing profile XML files",
)
@click.pass_context
def cli(
    ctx: Any,
    log_level: Optional[str],
    log_file: Optional[str],
    profile_dir: Optional[str],
) -> None:
    """Sync profile tool.

    Inspect when synchronization profiles run next and adjust their settings.
    """
    config = get_config()
    setup_logging(
        log_level=log_level or config.log_level,
        log_file=Path(log_file) if log_file else config.log_file,
    )
    ctx.obj = make_store(profile_dir, config)


cli.add_command(list_command)
cli.add_command(show_command)
cli.add_command(next_run_command)
cli.add_command(backends_command)
cli.add_command(set_direction_command)
cli.add_command(set_retries_command)


if __name__ == "__main__":
    cli()
