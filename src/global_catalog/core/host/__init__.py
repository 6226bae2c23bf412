from global_catalog.core.host.abc import (
    BuildTree,
    CatalogApplication,
    CatalogHandle,
    LifecyclePhase,
    VersionCatalogs,
)
from global_catalog.core.host.real import RealBuildTree, RealVersionCatalogs

__all__ = [
    "BuildTree",
    "CatalogApplication",
    "CatalogHandle",
    "LifecyclePhase",
    "RealBuildTree",
    "RealVersionCatalogs",
    "VersionCatalogs",
]
