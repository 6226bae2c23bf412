"""Catalog file location.

The local catalog of a build always lives at a fixed path relative to the
build directory. Locating it never touches the filesystem; existence is
checked only when a caller actually consumes the value.
"""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_CATALOG_PATH = "gradle/versions.toml"


@dataclass(frozen=True)
class CatalogFile:
    """A candidate version catalog file.

    Only the path is stored. Existence is a live filesystem query so that a
    file created between evaluations is picked up by the next one.
    """

    path: Path

    def exists(self) -> bool:
        """Check whether the catalog file is present on disk."""
        return self.path.is_file()


def locate_catalog_file(build_dir: Path, relative_path: str = DEFAULT_CATALOG_PATH) -> CatalogFile:
    """Return the candidate local catalog for a build directory.

    Args:
        build_dir: Root directory of the build
        relative_path: Catalog location relative to build_dir

    Returns:
        CatalogFile pointing at build_dir / relative_path (may not exist)
    """
    return CatalogFile(path=build_dir / relative_path)


def catalog_file_exists(catalog_file: CatalogFile) -> bool:
    """Predicate form of CatalogFile.exists for provider filtering."""
    return catalog_file.exists()
