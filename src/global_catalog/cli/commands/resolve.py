"""Resolve command implementation - evaluates a chain of nested builds."""

from pathlib import Path

import click

from global_catalog.cli.json_output import emit_json, error_boundary
from global_catalog.cli.json_schemas import (
    AppliedCatalogInfo,
    BuildResolutionInfo,
    ResolveCommandResponse,
)
from global_catalog.cli.output import render_applications, user_output
from global_catalog.core.build_chain import BuildResolution, resolve_build_chain

_BUILD_DIR = click.Path(exists=True, file_okay=False, path_type=Path)


def _to_info(resolution: BuildResolution) -> BuildResolutionInfo:
    authoritative = resolution.authoritative_catalog
    return BuildResolutionInfo(
        build_dir=str(resolution.build_dir),
        depth=resolution.depth,
        authoritative_catalog=str(authoritative.path) if authoritative is not None else None,
        applied=[AppliedCatalogInfo.from_application(a) for a in resolution.applications],
    )


@click.command("resolve")
@click.argument("root_dir", type=_BUILD_DIR)
@click.argument("included_dirs", nargs=-1, type=_BUILD_DIR)
@click.option(
    "--format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@error_boundary
def resolve_cmd(root_dir: Path, included_dirs: tuple[Path, ...], format: str) -> None:
    """Show which catalogs each build of a nested build chain applies.

    ROOT_DIR is the outermost build. Each INCLUDED_DIR is a build included by
    the one listed before it.
    """
    resolutions = resolve_build_chain([root_dir, *included_dirs])

    if format == "json":
        response = ResolveCommandResponse(builds=[_to_info(r) for r in resolutions])
        emit_json(response.model_dump(mode="json"))
        return

    for resolution in resolutions:
        indent = "  " * resolution.depth
        render_applications(f"{indent}{resolution.build_dir}", resolution.applications)
    user_output(f"Evaluated {len(resolutions)} build(s)")
