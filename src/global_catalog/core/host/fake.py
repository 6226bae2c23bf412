"""Fake catalog container for testing.

FakeVersionCatalogs records applications and emulates the host's
last-write-wins loading of catalog files, using version tables supplied to
the constructor instead of reading files.
"""

from pathlib import Path

from global_catalog.core.host.abc import CatalogApplication, CatalogHandle, VersionCatalogs


class FakeCatalogHandle(CatalogHandle):
    def __init__(self, name: str, owner: "FakeVersionCatalogs") -> None:
        self._name = name
        self._owner = owner
        self._sources: list[Path] = []

    @property
    def name(self) -> str:
        return self._name

    def add_source(self, path: Path) -> None:
        self._sources.append(path)
        self._owner._applications.append(
            CatalogApplication(catalog_name=self._name, path=path, phase=None)
        )

    def sources(self) -> list[Path]:
        return list(self._sources)


class FakeVersionCatalogs(VersionCatalogs):
    """In-memory fake catalog container.

    This class has NO public setup methods. All state is provided via
    constructor or captured during execution.

    Examples:
        >>> catalogs = FakeVersionCatalogs(
        ...     file_versions={Path("/root/gradle/versions.toml"): {"kotlin": "2.0.0"}}
        ... )
        >>> catalogs.create_or_get_catalog("libs").add_source(Path("/root/gradle/versions.toml"))
        >>> catalogs.versions("libs")
        {'kotlin': '2.0.0'}
    """

    def __init__(self, *, file_versions: dict[Path, dict[str, str]] | None = None) -> None:
        """Create FakeVersionCatalogs.

        Args:
            file_versions: Version table of each catalog file (path -> key -> version)
        """
        self._file_versions = file_versions or {}
        self._catalogs: dict[str, FakeCatalogHandle] = {}
        self._applications: list[CatalogApplication] = []
        self._create_calls: list[str] = []

    @property
    def create_calls(self) -> list[str]:
        """Names passed to create_or_get_catalog(), in call order.

        This property is for test assertions only.
        """
        return self._create_calls

    def create_or_get_catalog(self, name: str) -> CatalogHandle:
        self._create_calls.append(name)
        if name not in self._catalogs:
            self._catalogs[name] = FakeCatalogHandle(name, self)
        return self._catalogs[name]

    def find_catalog(self, name: str) -> CatalogHandle | None:
        return self._catalogs.get(name)

    def applications(self) -> list[CatalogApplication]:
        return list(self._applications)

    def versions(self, name: str) -> dict[str, str]:
        """Merge the version tables of a catalog's sources, later sources winning."""
        catalog = self._catalogs.get(name)
        if catalog is None:
            return {}
        merged: dict[str, str] = {}
        for path in catalog.sources():
            merged.update(self._file_versions.get(path, {}))
        return merged
