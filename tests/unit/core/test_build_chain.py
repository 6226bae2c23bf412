"""Tests for evaluating chains of nested builds."""

from pathlib import Path

import pytest

from global_catalog.core.build_chain import resolve_build_chain
from global_catalog.core.catalog_file import CatalogFile
from tests.test_utils.catalogs import create_build


def test_empty_chain_rejected() -> None:
    with pytest.raises(ValueError, match="At least one build directory"):
        resolve_build_chain([])


def test_single_build(tmp_path: Path) -> None:
    build_dir = create_build(tmp_path, "app", {"kotlin": "2.0.0"})
    catalog = build_dir / "gradle" / "versions.toml"

    [resolution] = resolve_build_chain([build_dir])

    assert resolution.depth == 0
    assert resolution.authoritative_catalog == CatalogFile(path=catalog)
    assert [(a.path, a.phase) for a in resolution.applications] == [(catalog, "configure")]


def test_chain_shares_root_catalog(tmp_path: Path) -> None:
    root_dir = create_build(tmp_path, "root", {"kotlin": "2.0.0"})
    child_dir = create_build(tmp_path, "child", {"kotlin": "1.9.0"})
    root_catalog = root_dir / "gradle" / "versions.toml"
    child_catalog = child_dir / "gradle" / "versions.toml"

    root, child = resolve_build_chain([root_dir, child_dir])

    assert [(a.path, a.phase) for a in root.applications] == [(root_catalog, "configure")]
    assert [(a.path, a.phase) for a in child.applications] == [
        (child_catalog, "configure"),
        (root_catalog, "finalized"),
    ]
    assert child.depth == 1
    assert child.authoritative_catalog == CatalogFile(path=root_catalog)


def test_settings_loaded_per_build(tmp_path: Path) -> None:
    root_dir = create_build(tmp_path, "root")
    (root_dir / "deps.toml").write_text("[versions]\n", encoding="utf-8")
    (root_dir / "pyproject.toml").write_text(
        '[tool.global-catalog]\ncatalog_path = "deps.toml"\n', encoding="utf-8"
    )
    child_dir = create_build(tmp_path, "child")

    root, child = resolve_build_chain([root_dir, child_dir])

    assert [a.path for a in root.applications] == [root_dir / "deps.toml"]
    assert [a.path for a in child.applications] == [root_dir / "deps.toml"]


def test_mismatched_service_names_do_not_share(tmp_path: Path) -> None:
    root_dir = create_build(tmp_path, "root", {"kotlin": "2.0.0"})
    (root_dir / "pyproject.toml").write_text(
        '[tool.global-catalog]\nservice_name = "rootCatalog"\n', encoding="utf-8"
    )
    child_dir = create_build(tmp_path, "child")

    _, child = resolve_build_chain([root_dir, child_dir])

    assert child.applications == []
    assert child.authoritative_catalog is None
