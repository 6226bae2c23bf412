"""Host build tool interfaces.

The catalog pipeline runs inside a host build tool. These interfaces describe
the few host capabilities it relies on: the build tree (directory, parent,
shared services, lifecycle hooks) and the host's named catalog container.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from global_catalog.core.registry.abc import SharedServices

LifecyclePhase = Literal["configure", "finalized"]


@dataclass(frozen=True)
class CatalogApplication:
    """One catalog file added to a named host catalog."""

    catalog_name: str
    path: Path
    phase: LifecyclePhase | None


class CatalogHandle(ABC):
    """A named catalog on the host's dependency resolution surface."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def add_source(self, path: Path) -> None:
        """Add a catalog file to this catalog's source set.

        The host loads sources in order with last-write-wins key merging.
        """
        ...

    @abstractmethod
    def sources(self) -> list[Path]:
        """List source files in the order they were added."""
        ...


class VersionCatalogs(ABC):
    """The host's container of named catalogs."""

    @abstractmethod
    def create_or_get_catalog(self, name: str) -> CatalogHandle:
        """Return the catalog named name, creating it on first request."""
        ...

    @abstractmethod
    def find_catalog(self, name: str) -> CatalogHandle | None:
        """Return the catalog named name without creating it."""
        ...

    @abstractmethod
    def applications(self) -> list[CatalogApplication]:
        """List every add_source() made through this container, in order."""
        ...


BuildAction = Callable[["BuildTree"], None]


class BuildTree(ABC):
    """One build in a hierarchy of nested builds.

    All implementations (real and fake) must implement this interface.
    """

    @property
    @abstractmethod
    def build_dir(self) -> Path:
        """Root directory of this build."""
        ...

    @property
    @abstractmethod
    def parent(self) -> "BuildTree | None":
        """The build that included this one, or None for the root build."""
        ...

    @property
    @abstractmethod
    def shared_services(self) -> SharedServices:
        """Registry scoped to this build tree's lifetime."""
        ...

    @property
    @abstractmethod
    def catalogs(self) -> VersionCatalogs:
        """Catalog container of this build."""
        ...

    @abstractmethod
    def on_configure(self, action: BuildAction) -> None:
        """Run action when the build is configured (construction time)."""
        ...

    @abstractmethod
    def on_local_configuration_finalized(self, action: BuildAction) -> None:
        """Run action once local configuration of the build is finalized."""
        ...
