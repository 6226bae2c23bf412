"""Pydantic models for JSON output schemas.

These models define the validated output of commands run with
`--format json`.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from global_catalog.core.host.abc import CatalogApplication


class LocateCommandResponse(BaseModel):
    """JSON response schema for the `global-catalog locate` command.

    Attributes:
        build_dir: Build directory that was inspected
        catalog_path: Candidate local catalog path
        exists: Whether the candidate exists on disk
    """

    model_config = ConfigDict(strict=True)

    build_dir: str
    catalog_path: str
    exists: bool


class AppliedCatalogInfo(BaseModel):
    """One catalog file applied to a build."""

    model_config = ConfigDict(strict=True)

    catalog_name: str
    path: str
    phase: Literal["configure", "finalized"] | None = None

    @staticmethod
    def from_application(application: CatalogApplication) -> "AppliedCatalogInfo":
        return AppliedCatalogInfo(
            catalog_name=application.catalog_name,
            path=str(application.path),
            phase=application.phase,
        )


class BuildResolutionInfo(BaseModel):
    """Catalog resolution result of one build in the chain.

    Attributes:
        build_dir: Build directory
        depth: 0 for the root build, parent depth + 1 for nested builds
        authoritative_catalog: Catalog shared with nested builds, None if absent
        applied: Applications in the order they happened
    """

    model_config = ConfigDict(strict=True)

    build_dir: str
    depth: int = Field(ge=0)
    authoritative_catalog: str | None
    applied: list[AppliedCatalogInfo]


class ResolveCommandResponse(BaseModel):
    """JSON response schema for the `global-catalog resolve` command."""

    model_config = ConfigDict(strict=True)

    builds: list[BuildResolutionInfo]
