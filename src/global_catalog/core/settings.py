"""Per-build catalog settings.

Settings are read from the `[tool.global-catalog]` table of a build's
pyproject.toml. Every key is optional:

    [tool.global-catalog]
    catalog_name = "libs"
    service_name = "globalCatalog"
    catalog_path = "gradle/versions.toml"
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from global_catalog.core.catalog_file import DEFAULT_CATALOG_PATH

DEFAULT_CATALOG_NAME = "libs"
DEFAULT_SERVICE_NAME = "globalCatalog"

_KNOWN_KEYS = frozenset({"catalog_name", "service_name", "catalog_path"})


@dataclass(frozen=True)
class CatalogSettings:
    """Immutable catalog settings for one build.

    catalog_name is the host catalog receiving the files, service_name the
    shared registration parent and child builds agree on, catalog_path the
    local catalog location relative to the build directory.
    """

    catalog_name: str = DEFAULT_CATALOG_NAME
    service_name: str = DEFAULT_SERVICE_NAME
    catalog_path: str = DEFAULT_CATALOG_PATH


def load_settings(build_dir: Path) -> CatalogSettings:
    """Load settings from build_dir/pyproject.toml if present; otherwise return defaults.

    Raises:
        ValueError: If pyproject.toml is not valid TOML or the
            [tool.global-catalog] table is malformed
    """
    pyproject_path = build_dir / "pyproject.toml"
    if not pyproject_path.exists():
        return CatalogSettings()

    try:
        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {pyproject_path}: {e}") from e

    tool_section = data.get("tool")
    if tool_section is None:
        return CatalogSettings()

    if not isinstance(tool_section, dict):
        raise ValueError(f"[tool] must be a table in {pyproject_path}")

    section = tool_section.get("global-catalog")
    if section is None:
        return CatalogSettings()

    if not isinstance(section, dict):
        raise ValueError(f"[tool.global-catalog] must be a table in {pyproject_path}")

    unknown = sorted(set(section) - _KNOWN_KEYS)
    if unknown:
        raise ValueError(
            f"Unknown key(s) in [tool.global-catalog] of {pyproject_path}: {', '.join(unknown)}"
        )

    values: dict[str, str] = {}
    for key, value in section.items():
        if not isinstance(value, str) or not value:
            raise ValueError(
                f"'{key}' in [tool.global-catalog] of {pyproject_path} must be a non-empty string"
            )
        values[key] = value

    catalog_path = values.get("catalog_path")
    if catalog_path is not None and PurePosixPath(catalog_path).is_absolute():
        raise ValueError(
            f"'catalog_path' in [tool.global-catalog] of {pyproject_path} must be relative"
        )

    return CatalogSettings(**values)
