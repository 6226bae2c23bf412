"""Output utilities for CLI commands with clear intent.

- user_output: human-readable messages, routed to stderr
- machine_output: machine-parseable data (JSON), routed to stdout
- render_applications: rich table of catalog applications per build
"""

import click
from rich.console import Console
from rich.table import Table

from global_catalog.core.host.abc import CatalogApplication


def user_output(message: str = "") -> None:
    """Write a human-readable message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    """Write machine-parseable output to stdout."""
    click.echo(message)


def render_applications(
    build_dir: str, applications: list[CatalogApplication], console: Console | None = None
) -> None:
    """Print the catalog applications of one build as a table.

    Args:
        build_dir: Build directory used as the table title
        applications: Applications in the order they happened
        console: Rich Console for output (if None, creates one writing to stderr)
    """
    if console is None:
        console = Console(stderr=True, highlight=False)

    if not applications:
        console.print(f"{build_dir}: no catalog applied", style="dim", soft_wrap=True)
        return

    table = Table(title=build_dir, title_justify="left")
    table.add_column("#", justify="right")
    table.add_column("Catalog")
    table.add_column("Phase")
    table.add_column("File", overflow="fold")

    for index, application in enumerate(applications, start=1):
        phase_style = "green" if application.phase == "configure" else "yellow"
        table.add_row(
            str(index),
            application.catalog_name,
            f"[{phase_style}]{application.phase or '-'}[/{phase_style}]",
            str(application.path),
        )

    console.print(table)
