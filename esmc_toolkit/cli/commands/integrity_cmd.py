"""``esmc verify-package`` / ``esmc build-manifest`` / ``esmc verify-samples``.

``verify-package`` exits 0 only when the signature and every file check out.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.table import Table

from esmc_toolkit.config import config
from esmc_toolkit.integrity.package import (
    IntegrityError,
    PackageVerifier,
    build_manifest,
    write_signed_manifest,
)
from esmc_toolkit.integrity.samples import find_components_dir, verify_samples
from esmc_toolkit.models.integrity import IntegritySample

console = Console()


def verify_package_cmd(
    root: Path = typer.Argument(
        Path("."), help="Package root containing .claude/ and .package-signature."
    ),
) -> None:
    """Verify the package signature and every file checksum."""
    verifier = PackageVerifier(root, config)
    try:
        report = verifier.verify()
    except IntegrityError as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1)

    console.print(f"[bold]Build Version:[/bold] {report.build_version}")
    if not report.signature_valid:
        console.print("[bold red]SIGNATURE MISMATCH! Package may be tampered.[/bold red]")
        raise typer.Exit(code=1)
    console.print("[green]Signature valid[/green]")

    table = Table(title="File checksums")
    table.add_column("Result")
    table.add_column("Count", justify="right")
    table.add_row("[green]Verified[/green]", str(report.verified))
    table.add_row("[red]Modified[/red]", str(len(report.modified)))
    table.add_row("[red]Missing[/red]", str(len(report.missing)))
    console.print(table)
    for path in report.modified:
        console.print(f"  [red]Modified:[/red] {path}")
    for path in report.missing:
        console.print(f"  [red]Missing:[/red]  {path}")

    if not report.ok:
        console.print("[bold red]PACKAGE INTEGRITY COMPROMISED - do not deploy.[/bold red]")
        raise typer.Exit(code=1)
    console.print("[bold green]PACKAGE INTEGRITY VERIFIED[/bold green]")


def build_manifest_cmd(
    root: Path = typer.Argument(Path("."), help="Package root."),
    build_version: str = typer.Option(..., "--build-version", "-v", help="Build version."),
    architecture: str = typer.Option("", "--architecture", help="Free-form architecture label."),
    pattern: list[str] = typer.Option(
        ["**/*"], "--include", "-i", help="Glob(s) of files to checksum, relative to ROOT."
    ),
) -> None:
    """Checksum files under ROOT and write a signed integrity manifest."""
    excluded = {".package-signature", ".integrity-manifest.json"}
    files = sorted({
        path.relative_to(root).as_posix()
        for glob in pattern
        for path in root.glob(glob)
        if path.is_file() and path.name not in excluded
    })
    manifest = build_manifest(
        root, files, build_version=build_version, architecture=architecture
    )
    write_signed_manifest(root, manifest, config)
    console.print(
        f"[bold green]Signed manifest written[/bold green] ({manifest.total_files} files)"
    )


def verify_samples_cmd(
    samples_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help='JSON list of {"file", "hash"} pairs.'
    ),
    root: list[Path] = typer.Option(
        [Path(".")], "--root", "-r", help="Candidate package roots, tried in order."
    ),
) -> None:
    """Hash a sample of component files and compare with expected digests."""
    try:
        samples = TypeAdapter(list[IntegritySample]).validate_python(
            json.loads(samples_file.read_text(encoding="utf-8"))
        )
    except (ValidationError, ValueError) as exc:
        console.print(f"[bold red]Invalid samples file:[/bold red] {exc}")
        raise typer.Exit(code=2)

    result = verify_samples(samples, find_components_dir(root))
    if result.skipped:
        console.print("[yellow]Components directory not found - verification skipped.[/yellow]")
        return
    console.print(f"Verified {result.verified}/{result.total} files")
    for name in result.failed:
        console.print(f"  [red]Failed:[/red] {name}")
    if not result.success:
        raise typer.Exit(code=1)
