"""Locate command implementation - shows a build's candidate local catalog."""

from pathlib import Path

import click

from global_catalog.cli.json_output import emit_json, error_boundary
from global_catalog.cli.json_schemas import LocateCommandResponse
from global_catalog.cli.output import user_output
from global_catalog.core.catalog_file import locate_catalog_file
from global_catalog.core.settings import load_settings


@click.command("locate")
@click.argument(
    "build_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "--format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@error_boundary
def locate_cmd(build_dir: Path, format: str) -> None:
    """Show where BUILD_DIR's local version catalog is expected."""
    settings = load_settings(build_dir)
    catalog_file = locate_catalog_file(build_dir, settings.catalog_path)
    exists = catalog_file.exists()

    if format == "json":
        response = LocateCommandResponse(
            build_dir=str(build_dir),
            catalog_path=str(catalog_file.path),
            exists=exists,
        )
        emit_json(response.model_dump(mode="json"))
        return

    status = click.style("exists", fg="green") if exists else click.style("missing", fg="yellow")
    user_output(f"{catalog_file.path} ({status})")
