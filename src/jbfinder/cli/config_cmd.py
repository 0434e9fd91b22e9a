"""``jbfinder config --name <NAME>`` -- Show one IDE's configuration.

Looks up the instance whose directory name equals NAME exactly (case and
whitespace sensitive) and prints its directories, VM options and Toolbox
notification port.

Exit Codes:
    0 -- Instance found and printed.
    1 -- The logs root could not be determined or read.
    2 -- No instance with that name exists.
"""

from __future__ import annotations

import sys

import click

from jbfinder.cli.output import instance_to_json, print_error, print_instance_detail, print_json
from jbfinder.discovery import IDEScanner, PlatformProfile, get_installation
from jbfinder.exceptions import DiscoveryError, ToolNotFoundError


@click.command("config")
@click.option(
    "-n", "--name",
    required=True,
    help="Exact IDE directory name, e.g. IntelliJIdea2024.3.",
)
@click.option(
    "-o", "--output", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.pass_obj
def config_command(profile: PlatformProfile, name: str, output_format: str) -> None:
    """Show directories, VM options and notification port of one IDE."""
    try:
        instances = IDEScanner(profile).find_installations()
    except DiscoveryError as exc:
        print_error(str(exc))
        sys.exit(1)

    try:
        ide = get_installation(instances, name)
    except ToolNotFoundError as exc:
        print_error(str(exc))
        sys.exit(2)

    if output_format == "json":
        print_json(instance_to_json(ide))
    else:
        print_instance_detail(ide)
