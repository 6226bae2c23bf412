"""JSON output utilities for CLI commands with machine-parseable output."""

import json
from collections.abc import Callable
from functools import wraps
from typing import Any

import click
from pydantic import BaseModel, ConfigDict, Field

from global_catalog.cli.output import machine_output, user_output
from global_catalog.core.errors import CatalogServiceError


class ErrorResponse(BaseModel):
    """Pydantic model for error JSON responses.

    Attributes:
        error: Error message
        error_type: Error class name (e.g., "CatalogServiceError")
        exit_code: Exit code for the process
    """

    model_config = ConfigDict(strict=True)

    error: str
    error_type: str
    exit_code: int = Field(default=1, ge=0, le=255)


def emit_json(data: dict[str, Any]) -> None:
    """Output JSON data to stdout for machine consumption.

    data must hold JSON types only; for Pydantic models pass
    model.model_dump(mode="json").
    """
    machine_output(json.dumps(data, indent=2))


def emit_json_error(error: str, error_type: str, exit_code: int = 1) -> None:
    """Output error as JSON and exit.

    Raises:
        SystemExit: Always raises to terminate with specified exit code
    """
    error_response = ErrorResponse(
        error=error,
        error_type=error_type,
        exit_code=exit_code,
    )
    emit_json(error_response.model_dump(mode="json"))
    raise SystemExit(exit_code)


def error_boundary(func: Callable) -> Callable:
    """Decorator turning expected failures into clean CLI errors.

    Inspects function kwargs for a 'format' parameter. With format == "json",
    any exception becomes a JSON ErrorResponse. With text output, catalog
    service and settings errors print a red "Error:" line; anything else
    bubbles up unchanged.

    Example:
        @click.command()
        @click.option("--format", type=click.Choice(["text", "json"]), default="text")
        @error_boundary
        def my_command(format: str) -> None:
            ...
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except Exception as e:
            if kwargs.get("format", "text") == "json":
                emit_json_error(str(e), type(e).__name__, exit_code=1)
            if isinstance(e, (CatalogServiceError, ValueError)):
                user_output(click.style("Error: ", fg="red") + str(e))
                raise SystemExit(1) from e
            raise

    return wrapper
