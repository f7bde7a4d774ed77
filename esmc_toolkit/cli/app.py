"""Main Typer application — imports and registers all CLI commands.

Entry point: ``esmc`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer

from esmc_toolkit.cli.commands.hardware_cmd import hardware_cmd
from esmc_toolkit.cli.commands.hash_cmd import hash_cmd
from esmc_toolkit.cli.commands.integrity_cmd import (
    build_manifest_cmd,
    verify_package_cmd,
    verify_samples_cmd,
)
from esmc_toolkit.cli.commands.license_cmd import (
    license_cmd,
    logout_cmd,
    sync_license_cmd,
)
from esmc_toolkit.cli.commands.tier_cmd import tier_cmd
from esmc_toolkit.config import config
from esmc_toolkit.core.production_guard import (
    ProductionConfigError,
    enforce_production_constraints,
)

app = typer.Typer(
    name="esmc",
    help="ESMC toolkit: tier gating, licensing and package integrity.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def _startup() -> None:
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        enforce_production_constraints(config)
    except ProductionConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)


# Register subcommands
app.command(name="hash", help="SHA-256 of a string or file.")(hash_cmd)
app.command(name="hardware", help="Show this machine's hardware fingerprint.")(hardware_cmd)
app.command(name="tier", help="Resolve the active subscription tier.")(tier_cmd)
app.command(name="license", help="Show the local license status.")(license_cmd)
app.command(name="sync-license", help="Write the license file from stored credentials.")(
    sync_license_cmd
)
app.command(name="logout", help="Remove stored credentials and the license file.")(logout_cmd)
app.command(name="verify-package", help="Verify the signed integrity manifest.")(
    verify_package_cmd
)
app.command(name="build-manifest", help="Write a signed integrity manifest.")(
    build_manifest_cmd
)
app.command(name="verify-samples", help="Spot-check component file hashes.")(
    verify_samples_cmd
)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
