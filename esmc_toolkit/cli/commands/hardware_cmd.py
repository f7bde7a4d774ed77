"""``esmc hardware`` — show this machine's fingerprint."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from esmc_toolkit.auth.hardware import device_name, hardware_id, os_info
from esmc_toolkit.config import config

console = Console()


def hardware_cmd() -> None:
    """Show the device name, OS and hardware fingerprint."""
    table = Table(title="Hardware", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Device", device_name())
    table.add_row("OS", str(os_info()))
    table.add_row("Hardware ID", hardware_id(config))
    console.print(table)
