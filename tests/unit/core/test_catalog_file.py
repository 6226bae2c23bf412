"""Tests for catalog file location."""

from pathlib import Path

from global_catalog.core.catalog_file import CatalogFile, catalog_file_exists, locate_catalog_file
from tests.test_utils.catalogs import write_catalog


def test_locate_returns_fixed_relative_path() -> None:
    catalog_file = locate_catalog_file(Path("/builds/app"))

    assert catalog_file == CatalogFile(path=Path("/builds/app/gradle/versions.toml"))


def test_locate_accepts_custom_relative_path() -> None:
    catalog_file = locate_catalog_file(Path("/builds/app"), "catalogs/deps.toml")

    assert catalog_file.path == Path("/builds/app/catalogs/deps.toml")


def test_locate_does_not_require_existing_directory(tmp_path: Path) -> None:
    """Locating never touches the filesystem."""
    missing_dir = tmp_path / "does-not-exist"

    catalog_file = locate_catalog_file(missing_dir)

    assert catalog_file.path == missing_dir / "gradle" / "versions.toml"
    assert not missing_dir.exists()


def test_exists_reflects_filesystem_at_call_time(tmp_path: Path) -> None:
    catalog_file = locate_catalog_file(tmp_path)
    assert not catalog_file.exists()

    write_catalog(tmp_path, {"kotlin": "2.0.0"})

    assert catalog_file.exists()
    assert catalog_file_exists(catalog_file)


def test_directory_at_catalog_path_is_not_a_catalog(tmp_path: Path) -> None:
    (tmp_path / "gradle" / "versions.toml").mkdir(parents=True)

    assert not locate_catalog_file(tmp_path).exists()
