"""In-process nested build host.

RealBuildTree drives the two lifecycle points the catalog pipeline hooks
into. A build is configured, then finalized; nested builds can only be
included once their parent has been configured, so the parent's shared
services are always registered before any child looks them up.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from global_catalog.core.host.abc import (
    BuildAction,
    BuildTree,
    CatalogApplication,
    CatalogHandle,
    LifecyclePhase,
    VersionCatalogs,
)
from global_catalog.core.registry.abc import SharedServices
from global_catalog.core.registry.real import InMemorySharedServices

logger = logging.getLogger(__name__)


class RealCatalogHandle(CatalogHandle):
    """Catalog that records its source files in order."""

    def __init__(self, name: str, on_add: Callable[[str, Path], None]) -> None:
        self._name = name
        self._on_add = on_add
        self._sources: list[Path] = []

    @property
    def name(self) -> str:
        return self._name

    def add_source(self, path: Path) -> None:
        self._sources.append(path)
        self._on_add(self._name, path)

    def sources(self) -> list[Path]:
        return list(self._sources)


class RealVersionCatalogs(VersionCatalogs):
    """Catalog container tagging each application with the current lifecycle phase."""

    def __init__(self, current_phase: Callable[[], LifecyclePhase | None]) -> None:
        self._current_phase = current_phase
        self._catalogs: dict[str, RealCatalogHandle] = {}
        self._applications: list[CatalogApplication] = []

    def create_or_get_catalog(self, name: str) -> CatalogHandle:
        if name not in self._catalogs:
            logger.debug("Creating catalog: name=%s", name)
            self._catalogs[name] = RealCatalogHandle(name, self._record)
        return self._catalogs[name]

    def find_catalog(self, name: str) -> CatalogHandle | None:
        return self._catalogs.get(name)

    def applications(self) -> list[CatalogApplication]:
        return list(self._applications)

    def _record(self, catalog_name: str, path: Path) -> None:
        self._applications.append(
            CatalogApplication(catalog_name=catalog_name, path=path, phase=self._current_phase())
        )


class RealBuildTree(BuildTree):
    """A build evaluated in-process, optionally nested in a parent build."""

    def __init__(
        self,
        build_dir: Path,
        parent: BuildTree | None = None,
        *,
        shared_services: SharedServices | None = None,
        catalogs: VersionCatalogs | None = None,
    ) -> None:
        self._build_dir = build_dir
        self._parent = parent
        self._shared_services = (
            shared_services if shared_services is not None else InMemorySharedServices()
        )
        self._phase: LifecyclePhase | None = None
        self._catalogs = (
            catalogs if catalogs is not None else RealVersionCatalogs(lambda: self._phase)
        )
        self._configure_actions: list[BuildAction] = []
        self._finalized_actions: list[BuildAction] = []
        self._configured = False
        self._finalized = False

    @property
    def build_dir(self) -> Path:
        return self._build_dir

    @property
    def parent(self) -> BuildTree | None:
        return self._parent

    @property
    def shared_services(self) -> SharedServices:
        return self._shared_services

    @property
    def catalogs(self) -> VersionCatalogs:
        return self._catalogs

    @property
    def phase(self) -> LifecyclePhase | None:
        """Lifecycle phase currently running, None outside of hooks."""
        return self._phase

    @property
    def is_configured(self) -> bool:
        return self._configured

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def on_configure(self, action: BuildAction) -> None:
        if self._configured:
            raise RuntimeError(f"Build at {self._build_dir} is already configured")
        self._configure_actions.append(action)

    def on_local_configuration_finalized(self, action: BuildAction) -> None:
        if self._finalized:
            raise RuntimeError(f"Build at {self._build_dir} is already finalized")
        self._finalized_actions.append(action)

    def configure(self) -> None:
        """Run configure actions in registration order."""
        if self._configured:
            raise RuntimeError(f"Build at {self._build_dir} is already configured")
        logger.debug("Configuring build: build_dir=%s", self._build_dir)
        self._run(self._configure_actions, "configure")
        self._configured = True

    def finalize(self) -> None:
        """Run local-configuration-finalized actions in registration order."""
        if not self._configured:
            raise RuntimeError(f"Build at {self._build_dir} must be configured before finalizing")
        if self._finalized:
            raise RuntimeError(f"Build at {self._build_dir} is already finalized")
        logger.debug("Finalizing build: build_dir=%s", self._build_dir)
        self._run(self._finalized_actions, "finalized")
        self._finalized = True

    def evaluate(self) -> None:
        """Configure then finalize this build."""
        self.configure()
        self.finalize()

    def include_build(self, build_dir: Path) -> "RealBuildTree":
        """Create a nested build whose parent is this build.

        Raises:
            RuntimeError: If this build has not been configured yet
        """
        if not self._configured:
            raise RuntimeError(
                f"Cannot include {build_dir}: build at {self._build_dir} is not configured yet"
            )
        return RealBuildTree(build_dir, parent=self)

    def _run(self, actions: list[BuildAction], phase: LifecyclePhase) -> None:
        self._phase = phase
        try:
            for action in actions:
                action(self)
        finally:
            self._phase = None
