"""``esmc license`` / ``esmc sync-license`` / ``esmc logout``."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from esmc_toolkit.auth.credentials import CredentialStore
from esmc_toolkit.auth.license_manager import LicenseManager
from esmc_toolkit.auth.sync import LicenseSyncError, sync_license
from esmc_toolkit.config import config

console = Console()

_LICENSE_DIR_OPTION = typer.Option(
    None,
    "--license-dir",
    "-d",
    help="Directory holding the license file (auto-detected when omitted).",
)


def license_cmd(license_dir: Path = _LICENSE_DIR_OPTION) -> None:
    """Show the current license and whether it is valid."""
    manager = LicenseManager(license_dir, config)
    result = manager.validate()

    if not result.valid:
        console.print(f"[bold yellow]No valid license:[/bold yellow] {result.reason}")
        console.print(f"[dim]Tier: {result.tier.value}[/dim]")
        raise typer.Exit(code=1)

    table = Table(title="License", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("File", str(manager.license_path))
    table.add_row("User", result.email or "")
    table.add_row("Tier", result.tier.value)
    table.add_row("Status", result.subscription_status or "")
    if result.subscription_end_date:
        table.add_row("Expires", f"{result.subscription_end_date:%b %d, %Y}")
    console.print(table)


def sync_license_cmd(
    credentials_path: Path = typer.Option(
        None,
        "--credentials",
        "-c",
        help="Credentials file (defaults to ESMC_CREDENTIALS_PATH).",
    ),
    license_dir: Path = _LICENSE_DIR_OPTION,
) -> None:
    """Convert stored login credentials into the license file."""
    store = CredentialStore(credentials_path or config.credentials_path)
    manager = LicenseManager(license_dir, config)
    try:
        license_data = sync_license(store, manager)
    except LicenseSyncError as exc:
        console.print(f"[bold red]License sync failed:[/bold red] {exc}")
        raise typer.Exit(code=1)

    console.print("[bold green]License sync successful[/bold green]")
    console.print(f"  License file: {manager.license_path}")
    console.print(f"  User:         {license_data.email}")
    console.print(f"  Tier:         {license_data.tier.value}")
    if license_data.subscription_end_date:
        console.print(f"  Expires:      {license_data.subscription_end_date:%b %d, %Y}")


def logout_cmd(
    credentials_path: Path = typer.Option(
        None,
        "--credentials",
        "-c",
        help="Credentials file (defaults to ESMC_CREDENTIALS_PATH).",
    ),
    license_dir: Path = _LICENSE_DIR_OPTION,
) -> None:
    """Remove stored credentials and the license file."""
    CredentialStore(credentials_path or config.credentials_path).clear()
    removed = LicenseManager(license_dir, config).delete()
    console.print(
        "[green]Logged out.[/green]" if removed else "[dim]No license file to remove.[/dim]"
    )
