"""
CLI entry point for the Nexus artifact migrator using Click.

The command loads the configuration and credentials files, then runs the
migration pipeline until the process is stopped.
"""

import sys

import click

from ._version import __version__
from .exceptions import ConfigError
from .pipeline import MigrationPipeline
from .utils import setup_logging
from .utils.config_manager import load_settings
from .utils.error_handling import log_and_exit
from .utils.constants import DEFAULT_AUTH_PATH, DEFAULT_CONFIG_PATH, EXIT_GENERAL_ERROR, EXIT_USER_INTERRUPT


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="nexus-migrator")
@click.option(
    "--migrator-conf-file",
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="File (JSON) containing configuration for the Nexus Artifact Migrator.",
)
@click.option(
    "--migrator-auth-file",
    default=DEFAULT_AUTH_PATH,
    show_default=True,
    help="File (JSON) containing authentication for the Nexus servers accessed by the Artifact Migrator.",
)
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG, -ddd for DEBUG with HTTP logs)",
)
def cli(migrator_conf_file: str, migrator_auth_file: str, debug: int) -> None:
    """Nexus Migrator - Copy every artifact of a repository tree to another server."""
    setup_logging(debug)

    try:
        settings = load_settings(migrator_conf_file, migrator_auth_file)
    except ConfigError as e:
        log_and_exit(str(e), EXIT_GENERAL_ERROR)

    # Click turns an interrupt that escapes the command into "Aborted!" with status 1
    try:
        with MigrationPipeline.from_settings(settings) as pipeline:
            pipeline.run_forever()
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(EXIT_USER_INTERRUPT)


def main() -> None:
    """Main entry point for the CLI."""
    cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters


__all__ = ["cli", "main"]
