"""``jbfinder list`` -- List installed JetBrains IDEs.

By default only IDEs that have written an ``idea.log`` are shown. With
``--verbose`` every product directory under the logs root is listed and
the ones without a log file are marked.

Exit Codes:
    0 -- Listing printed (possibly empty).
    1 -- The logs root could not be determined or read.
"""

from __future__ import annotations

import sys

import click

from jbfinder.cli.output import instances_to_json, print_error, print_instance_list, print_json
from jbfinder.discovery import IDEScanner, PlatformProfile, list_installations
from jbfinder.exceptions import DiscoveryError


@click.command("list")
@click.option(
    "-v", "--verbose",
    is_flag=True,
    default=False,
    help="Show all found IDE paths even if no log file is present.",
)
@click.option(
    "-o", "--output", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.pass_obj
def list_command(profile: PlatformProfile, verbose: bool, output_format: str) -> None:
    """List installed JetBrains IDEs."""
    try:
        instances = IDEScanner(profile).find_installations()
    except DiscoveryError as exc:
        print_error(str(exc))
        sys.exit(1)

    shown = list_installations(instances, verbose=verbose)
    if output_format == "json":
        print_json(instances_to_json(shown))
    else:
        print_instance_list(shown, verbose=verbose)
