"""jbfinder CLI -- Discover installed JetBrains IDEs.

Entry point for the ``jbfinder`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    list    -- List installed IDEs (``--verbose`` to include unused ones).
    config  -- Show directories, VM options and port of one IDE.

Usage::

    jbfinder list
    jbfinder list --verbose --output json
    jbfinder config --name IntelliJIdea2024.3
    jbfinder --logs-root ./fixtures/logs list
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from jbfinder import __version__
from jbfinder.cli.config_cmd import config_command
from jbfinder.cli.list_cmd import list_command
from jbfinder.discovery import OverrideProfile, current_profile


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--logs-root",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="JBFINDER_LOGS_ROOT",
    default=None,
    help="Override the JetBrains logs root [env: JBFINDER_LOGS_ROOT].",
)
@click.option(
    "--config-root",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="JBFINDER_CONFIG_ROOT",
    default=None,
    help="Override the JetBrains config root [env: JBFINDER_CONFIG_ROOT].",
)
@click.option("--debug", is_flag=True, default=False, help="Log discovery steps to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    logs_root: Path | None,
    config_root: Path | None,
    debug: bool,
) -> None:
    """jbfinder: Find installed JetBrains IDEs and their configuration.

    Performs a read-only scan of the JetBrains log, config and install
    directories for the current platform.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    profile = current_profile()
    if logs_root is not None or config_root is not None:
        profile = OverrideProfile(profile, logs_root=logs_root, config_root=config_root)
    ctx.obj = profile


# Register all subcommands
cli.add_command(list_command)
cli.add_command(config_command)
