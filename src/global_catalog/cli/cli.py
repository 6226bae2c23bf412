import logging
import os

import click

from global_catalog.cli.commands.locate import locate_cmd
from global_catalog.cli.commands.resolve import resolve_cmd

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "GLOBAL_CATALOG_DEBUG"


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="global-catalog")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool) -> None:
    """Inspect how version catalogs propagate through nested builds."""
    if debug or os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


# Register all commands
cli.add_command(locate_cmd)
cli.add_command(resolve_cmd)


def main() -> None:
    """CLI entry point used by the `global-catalog` console script."""
    cli()
