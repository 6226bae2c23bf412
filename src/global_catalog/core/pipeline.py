"""Catalog resolution pipeline.

apply_global_catalog() wires a build into its tree's shared catalog:

1. Build two lazy providers: the local catalog of this build and the
   authoritative catalog of the parent build, both limited to existing files.
2. Register (or reuse) this tree's GlobalCatalogService, whose catalog is the
   parent's when it exists and the local one otherwise.
3. Apply the local catalog right away so it is loaded first.
4. Once local configuration is finalized, apply the authoritative catalog
   again so its versions override the local ones, unless it is the very
   file already applied in step 3.

Catalog contents are never read here; the host merges applied files with
last-write-wins semantics.
"""

import logging

from global_catalog.core.catalog_file import (
    CatalogFile,
    catalog_file_exists,
    locate_catalog_file,
)
from global_catalog.core.errors import CatalogServiceError
from global_catalog.core.host.abc import BuildTree, VersionCatalogs
from global_catalog.core.provider import CatalogProvider
from global_catalog.core.registry.abc import Registration
from global_catalog.core.service import GlobalCatalogService, read_authoritative_file
from global_catalog.core.settings import CatalogSettings

logger = logging.getLogger(__name__)


class CatalogApplier:
    """Adds catalog files to one named host catalog."""

    def __init__(self, catalogs: VersionCatalogs, catalog_name: str) -> None:
        self._catalogs = catalogs
        self._catalog_name = catalog_name

    def apply(self, catalog_file: CatalogFile) -> bool:
        """Add catalog_file to the catalog, creating the catalog if needed.

        Returns:
            True if the file was added, False if the catalog already had it
        """
        existing = self._catalogs.find_catalog(self._catalog_name)
        if existing is not None and catalog_file.path in existing.sources():
            logger.debug(
                "Catalog file already applied: catalog=%s, file=%s",
                self._catalog_name,
                catalog_file.path,
            )
            return False

        catalog = self._catalogs.create_or_get_catalog(self._catalog_name)
        catalog.add_source(catalog_file.path)
        logger.debug(
            "Applied catalog file: catalog=%s, file=%s", self._catalog_name, catalog_file.path
        )
        return True


def parent_catalog_file(tree: BuildTree, service_name: str) -> CatalogProvider[CatalogFile]:
    """Provider of the parent build's authoritative catalog.

    Only the immediate parent is consulted. Its registration already folds
    in every further ancestor, since each level resolves its own catalog
    from its parent's first.

    Raises:
        CatalogServiceError: If the parent's registry lookup fails
    """
    parent = tree.parent
    if parent is None:
        return CatalogProvider.absent()

    try:
        registration = parent.shared_services.find_registration(service_name)
    except Exception as e:
        raise CatalogServiceError(
            service_name, f"lookup in parent build {parent.build_dir} failed: {e}"
        ) from e

    if registration is None:
        logger.debug(
            "No shared catalog registered by parent: service=%s, parent=%s",
            service_name,
            parent.build_dir,
        )
        return CatalogProvider.absent()

    return CatalogProvider.of(registration).map(read_authoritative_file)


def apply_global_catalog(
    tree: BuildTree, settings: CatalogSettings | None = None
) -> Registration[GlobalCatalogService]:
    """Wire tree into the shared catalog of its build hierarchy.

    Must run while tree is being configured, before any nested build of
    tree is created.

    Args:
        tree: The build being configured
        settings: Catalog settings, defaults when None

    Returns:
        The tree's GlobalCatalogService registration (shared across calls)

    Raises:
        CatalogServiceError: If the parent's shared service cannot be read
    """
    if settings is None:
        settings = CatalogSettings()

    local_candidate = locate_catalog_file(tree.build_dir, settings.catalog_path)
    local = CatalogProvider.of(local_candidate).filter(catalog_file_exists)
    global_ = parent_catalog_file(tree, settings.service_name).filter(catalog_file_exists)

    registration = tree.shared_services.register_if_absent(
        settings.service_name,
        lambda: GlobalCatalogService(global_.or_else(local)),
    )

    applier = CatalogApplier(tree.catalogs, settings.catalog_name)

    # Local catalog first so the authoritative catalog can override it
    local_file = local.get_or_none()
    if local_file is not None:
        applier.apply(local_file)
    else:
        logger.debug("No local catalog: candidate=%s", local_candidate.path)

    def apply_authoritative(_: BuildTree) -> None:
        authoritative = read_authoritative_file(registration)
        if authoritative is None:
            logger.debug("No authoritative catalog for build: build_dir=%s", tree.build_dir)
            return
        if authoritative.path == local_candidate.path:
            return
        applier.apply(authoritative)

    tree.on_local_configuration_finalized(apply_authoritative)
    return registration
