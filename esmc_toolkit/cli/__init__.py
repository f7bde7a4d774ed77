"""ESMC CLI — Typer-based command-line interface.

Provides the ``esmc`` command with subcommands for hashing, inspecting the
hardware fingerprint, resolving the subscription tier, managing the local
license file, and verifying package integrity.

All output uses Rich for formatted terminal display.
"""
