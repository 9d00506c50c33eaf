"""
Status output helpers shared by the CLI and the wizard.
"""

from __future__ import annotations

import click


def print_info(message: str, indent: int = 0) -> None:
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}")


def print_success(message: str, indent: int = 0) -> None:
    """Print a success message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {message}")


def print_warning(message: str, indent: int = 0) -> None:
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}")


def print_error(message: object, indent: int = 0) -> None:
    """Print an error message to stderr."""
    prefix = "  " * indent
    click.echo(f"{prefix}{click.style('✗ ERROR', fg='red')}: {message}", err=True)
