"""Helpers for creating build directories with version catalogs."""

from pathlib import Path


def create_build(root: Path, name: str, versions: dict[str, str] | None = None) -> Path:
    """Create a build directory, with a gradle/versions.toml when versions is given.

    Returns:
        Path to the build directory
    """
    build_dir = root / name
    build_dir.mkdir(parents=True)
    if versions is not None:
        write_catalog(build_dir, versions)
    return build_dir


def write_catalog(build_dir: Path, versions: dict[str, str]) -> Path:
    """Write a minimal version catalog under build_dir."""
    catalog_path = build_dir / "gradle" / "versions.toml"
    catalog_path.parent.mkdir(parents=True, exist_ok=True)
    lines = ["[versions]"]
    lines.extend(f'{key} = "{value}"' for key, value in versions.items())
    catalog_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return catalog_path
