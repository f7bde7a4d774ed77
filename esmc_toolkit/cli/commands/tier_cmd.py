"""``esmc tier`` — resolve the active tier and list its features."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from esmc_toolkit.auth.credentials import CredentialStore
from esmc_toolkit.auth.tier_manager import TierManager
from esmc_toolkit.config import config

console = Console()


def tier_cmd(
    credentials_path: Path = typer.Option(
        None,
        "--credentials",
        "-c",
        help="Credentials file (defaults to ESMC_CREDENTIALS_PATH).",
    ),
) -> None:
    """Validate stored credentials and show the tier they unlock."""
    store = CredentialStore(credentials_path or config.credentials_path)
    manager = TierManager(store, config)
    status = manager.initialize()
    features = manager.features

    lines = [
        f"[bold]Tier:[/bold]          {status.tier.value}",
        f"[bold]Source:[/bold]        {status.source}",
        f"[bold]Authenticated:[/bold] {'yes' if status.authenticated else 'no'}",
    ]
    if status.email:
        lines.append(f"[bold]User:[/bold]          {status.email}")
    if status.expires_at:
        lines.append(f"[bold]Expires:[/bold]       {status.expires_at:%b %d, %Y}")
    if status.message:
        lines.append(f"[dim]{status.message}[/dim]")
    lines += [
        "",
        f"[bold]Version:[/bold]       {features.version}",
        f"[bold]Colonels:[/bold]      {', '.join(c.value for c in features.colonels)}",
        f"[bold]Intelligence:[/bold]  {', '.join(features.intelligence)}",
        f"[bold]Memory:[/bold]        {features.memory}",
        f"[bold]Max projects:[/bold]  {features.max_projects}",
    ]

    console.print(
        Panel(
            "\n".join(lines),
            title=f"[bold]{features.display_name}[/bold]",
            border_style="green" if status.authenticated else "yellow",
            padding=(1, 2),
        )
    )
