"""Shared catalog service.

Each build tree registers one GlobalCatalogService. It carries the tree's
authoritative catalog provider, which nested builds read through their
parent's registry.
"""

import logging
from typing import Any

from global_catalog.core.catalog_file import CatalogFile
from global_catalog.core.errors import CatalogServiceError
from global_catalog.core.provider import CatalogProvider
from global_catalog.core.registry.abc import Registration

logger = logging.getLogger(__name__)


class GlobalCatalogService:
    """Registry value exposing a build tree's authoritative catalog."""

    def __init__(self, global_catalog_file: CatalogProvider[CatalogFile]) -> None:
        self._global_catalog_file = global_catalog_file

    def global_catalog_file(self) -> CatalogProvider[CatalogFile]:
        return self._global_catalog_file


def read_authoritative_file(registration: Registration[Any]) -> CatalogFile | None:
    """Resolve the authoritative catalog held by a registration.

    Builds the service if needed and resolves its provider.

    Raises:
        CatalogServiceError: If the service cannot be built, is not a
            GlobalCatalogService, or its provider fails to resolve
    """
    try:
        service = registration.get_service()
        if not isinstance(service, GlobalCatalogService):
            raise CatalogServiceError(
                registration.name,
                f"expected GlobalCatalogService, found {type(service).__name__}",
            )
        catalog_file = service.global_catalog_file().get_or_none()
    except CatalogServiceError:
        raise
    except Exception as e:
        raise CatalogServiceError(registration.name, f"failed to read catalog: {e}") from e

    logger.debug(
        "Authoritative catalog resolved: service=%s, file=%s",
        registration.name,
        catalog_file.path if catalog_file is not None else None,
    )
    return catalog_file
