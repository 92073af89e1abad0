"""Commands for inspecting and editing stored sync profiles."""

import logging
from typing import Optional, Tuple

import click
from rich.console import Console

from ...config import Config
from ...core.definitions import INT32_MAX
from ...core.profile import ProfileError, SyncDirection, SyncProfile
from ...storage import ProfileStore
from ..display import display_profile_details, display_profile_list, format_time

console = Console()
logger = logging.getLogger(__name__)

DIRECTION_CHOICES = {
    "two-way": SyncDirection.TWO_WAY,
    "from-remote": SyncDirection.FROM_REMOTE,
    "to-remote": SyncDirection.TO_REMOTE,
    "undefined": SyncDirection.UNDEFINED,
}


def _load_profile(store: ProfileStore, name: str) -> SyncProfile:
    """Load a profile or abort the command with a readable error."""
    try:
        profile = store.load(name)
    except ProfileError as e:
        raise click.ClickException(str(e)) from e
    if profile is None:
        raise click.ClickException(f"Profile '{name}' not found in {store.directory}")
    return profile


def _save_profile(store: ProfileStore, profile: SyncProfile) -> None:
    try:
        store.save(profile)
    except (ProfileError, OSError) as e:
        raise click.ClickException(f"Failed to save profile: {e}") from e


@click.command("list")
@click.pass_obj
def list_command(store: ProfileStore) -> None:
    """List stored profiles with their next sync time."""
    profiles = []
    for name in store.profile_names():
        try:
            profile = store.load(name)
        except ProfileError as e:
            logger.warning("Skipping unreadable profile '%s': %s", name, e)
            continue
        if profile is not None:
            profiles.append(profile)
    display_profile_list(profiles)


@click.command("show")
@click.argument("name")
@click.pass_obj
def show_command(store: ProfileStore, name: str) -> None:
    """Show the resolved settings of a profile."""
    display_profile_details(_load_profile(store, name))


@click.command("next-run")
@click.argument("name")
@click.option(
    "--attempt",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Retry attempt to compute the next run for",
)
@click.pass_obj
def next_run_command(store: ProfileStore, name: str, attempt: int) -> None:
    """Show when a profile syncs next, optionally mid-retry."""
    profile = _load_profile(store, name)
    profile.set_retry_attempt(attempt)

    next_sync = profile.next_sync_time()
    if next_sync is None:
        console.print(f"[yellow]No next sync known for '{name}'[/yellow]")
    else:
        console.print(f"[green]Next sync of '{name}': {format_time(next_sync)}[/green]")


@click.command("backends")
@click.argument("name")
@click.pass_obj
def backends_command(store: ProfileStore, name: str) -> None:
    """List the enabled storage backends of a profile."""
    backends = _load_profile(store, name).storage_backend_names()
    if not backends:
        console.print("[dim]No enabled storage backends[/dim]")
        return
    for backend in backends:
        console.print(backend)


@click.command("set-direction")
@click.argument("name")
@click.argument("direction", type=click.Choice(list(DIRECTION_CHOICES)))
@click.pass_obj
def set_direction_command(store: ProfileStore, name: str, direction: str) -> None:
    """Set the sync direction of a profile's client."""
    profile = _load_profile(store, name)
    if profile.client_profile() is None:
        raise click.ClickException(f"Profile '{name}' has no client profile")

    profile.set_sync_direction(DIRECTION_CHOICES[direction])
    _save_profile(store, profile)
    console.print(f"[green]✓ Sync direction of '{name}' set to {direction}[/green]")


@click.command("set-retries")
@click.argument("name")
@click.argument(
    "minutes", nargs=-1, type=click.IntRange(min=1, max=INT32_MAX)
)
@click.pass_obj
def set_retries_command(store: ProfileStore, name: str, minutes: Tuple[int, ...]) -> None:
    """Replace the retry delays (in minutes) of a profile.

    Without MINUTES all retries are removed.
    """
    profile = _load_profile(store, name)
    profile.set_retry_delays(list(minutes))
    _save_profile(store, profile)

    if minutes:
        delays = ", ".join(str(m) for m in minutes)
        console.print(f"[green]✓ Retry delays of '{name}': {delays} min[/green]")
    else:
        console.print(f"[green]✓ Retries of '{name}' removed[/green]")


def make_store(profile_dir: Optional[str], config: Config) -> ProfileStore:
    """Create the profile store from the CLI option or configuration."""
    return ProfileStore(profile_dir or config.profile_directory)
