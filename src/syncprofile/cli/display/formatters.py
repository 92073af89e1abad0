"""Display formatters for the CLI."""

from datetime import datetime
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...core.profile import SYNC_ON_CHANGE_UNSET, SyncProfile

console = Console()


def format_time(value: Optional[datetime]) -> str:
    """Format an optional timestamp for display."""
    if value is None:
        return "[dim]-[/dim]"
    return value.strftime("%Y-%m-%d %H:%M:%S")


def display_profile_list(profiles: List[SyncProfile]) -> None:
    """Display a one-row-per-profile overview.

    Args:
        profiles: Profiles to list
    """
    if not profiles:
        console.print("[yellow]No profiles found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Profile", style="cyan")
    table.add_column("Type")
    table.add_column("Service")
    table.add_column("Last Sync")
    table.add_column("Next Sync", style="green")

    for profile in profiles:
        table.add_row(
            profile.name(),
            profile.sync_type().value,
            profile.service_name() or "[dim]-[/dim]",
            format_time(profile.last_sync_time()),
            format_time(profile.next_sync_time()),
        )

    console.print(table)


def display_profile_details(profile: SyncProfile) -> None:
    """Display the resolved settings of a single profile.

    Args:
        profile: Profile to describe
    """
    console.print(f"\n[bold blue]Profile: {profile.name()}[/bold blue]\n")

    table = Table(show_header=False)
    table.add_column("Setting", style="cyan", width=28)
    table.add_column("Value", style="green")

    soc_after = profile.sync_on_change_after()
    retry_delays = profile.retry_policy.explicit_delays

    table.add_row("Sync Type", profile.sync_type().value)
    table.add_row("Schedule", escape(repr(profile.sync_schedule())))
    table.add_row("Service", profile.service_name() or "-")
    table.add_row("Destination", profile.destination_type().value)
    table.add_row("Direction", profile.sync_direction().value)
    table.add_row("Conflict Policy", profile.conflict_resolution_policy().value)
    table.add_row(
        "Sync On Change After",
        "unset" if soc_after == SYNC_ON_CHANGE_UNSET else str(soc_after),
    )
    table.add_row(
        "Retry Delays (min)",
        ", ".join(str(d) for d in retry_delays) if retry_delays else "none",
    )
    table.add_row("Storage Backends", ", ".join(profile.storage_backend_names()) or "-")
    table.add_row("Last Sync", format_time(profile.last_sync_time()))
    table.add_row("Next Sync", format_time(profile.next_sync_time()))

    console.print(table)
    console.print()
