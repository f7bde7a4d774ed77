"""``esmc hash`` — SHA-256 of a string or a file."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from esmc_toolkit.components.utility import hash_data
from esmc_toolkit.core.hasher import sha256_file

console = Console()


def hash_cmd(
    value: str = typer.Argument(None, help="Text to hash."),
    file: Path = typer.Option(
        None,
        "--file",
        "-f",
        exists=True,
        dir_okay=False,
        help="Hash this file's bytes instead of TEXT.",
    ),
) -> None:
    """Print the hex SHA-256 digest of TEXT or --file."""
    if file is not None:
        console.print(sha256_file(file))
        return
    if value is None:
        console.print("[bold red]Provide TEXT or --file.[/bold red]")
        raise typer.Exit(code=2)
    console.print(hash_data(value))
