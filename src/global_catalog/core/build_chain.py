"""Evaluate a chain of nested builds with the shared catalog applied.

The first directory is the root build; every following directory is a build
included by the one before it. Each build is fully evaluated before the next
one is included, so a build's shared catalog is registered before any nested
build looks it up.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from global_catalog.core.catalog_file import CatalogFile
from global_catalog.core.host.abc import BuildTree, CatalogApplication
from global_catalog.core.host.real import RealBuildTree
from global_catalog.core.pipeline import apply_global_catalog
from global_catalog.core.registry.abc import Registration
from global_catalog.core.service import GlobalCatalogService, read_authoritative_file
from global_catalog.core.settings import CatalogSettings, load_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResolution:
    """Outcome of evaluating one build of the chain."""

    build_dir: Path
    depth: int
    authoritative_catalog: CatalogFile | None
    applications: list[CatalogApplication]


def resolve_build_chain(build_dirs: list[Path]) -> list[BuildResolution]:
    """Evaluate each build of the chain in order.

    Settings are loaded per build from its pyproject.toml.

    Raises:
        ValueError: If build_dirs is empty or a build's settings are malformed
        CatalogServiceError: If a parent's shared catalog cannot be read
    """
    if not build_dirs:
        raise ValueError("At least one build directory is required")

    results: list[BuildResolution] = []
    tree: RealBuildTree | None = None
    for depth, build_dir in enumerate(build_dirs):
        tree = RealBuildTree(build_dir) if tree is None else tree.include_build(build_dir)
        settings = load_settings(build_dir)
        registrations: list[Registration[GlobalCatalogService]] = []

        def configure(
            configured: BuildTree,
            settings: CatalogSettings = settings,
            registrations: list[Registration[GlobalCatalogService]] = registrations,
        ) -> None:
            registrations.append(apply_global_catalog(configured, settings))

        tree.on_configure(configure)
        tree.evaluate()

        logger.debug("Evaluated build: depth=%d, build_dir=%s", depth, build_dir)
        results.append(
            BuildResolution(
                build_dir=build_dir,
                depth=depth,
                authoritative_catalog=read_authoritative_file(registrations[0]),
                applications=tree.catalogs.applications(),
            )
        )
    return results
