"""Output formatting helpers for the jbfinder CLI.

Plain ``click.echo`` lines for listings and JSON, a Rich-styled block for
single-instance details, and a stderr console for fatal errors. Rich
output is printed with ``soft_wrap=True`` so long paths are never broken
across lines.
"""

from __future__ import annotations

import json
from typing import Any

import click
from rich.console import Console
from rich.text import Text

from jbfinder.discovery.models import InstalledInstance

NOT_FOUND = "Not found"
EMPTY_LIST_MESSAGE = "No JetBrains IDEs found"
JSON_ROOT_KEY = "tools"

console = Console()
err_console = Console(stderr=True)


def format_instance_line(ide: InstalledInstance, verbose: bool = False) -> str:
    """Render one listing line: ``<name>: <install_dir>``."""
    line = f"{ide.name}: {ide.install_dir}"
    if verbose and not ide.has_log:
        line += " (no log file present)"
    return line


def print_instance_list(instances: list[InstalledInstance], verbose: bool = False) -> None:
    """Print one line per instance, or the empty-result message."""
    if not instances:
        click.echo(EMPTY_LIST_MESSAGE)
        return
    for ide in instances:
        click.echo(format_instance_line(ide, verbose))


def _label(label: str, value: str, style: str = "") -> Text:
    return Text.assemble(("  " + label.ljust(19), "bold"), (value, style))


def print_instance_detail(ide: InstalledInstance) -> None:
    """Print the labeled configuration block for a single instance.

    Args:
        ide: The resolved instance to describe.
    """
    console.print(
        Text.assemble((ide.name, "bold cyan"), (f" ({ide.product.display_name})", "dim")),
        soft_wrap=True,
    )
    console.print(_label("Install directory:", str(ide.install_dir)), soft_wrap=True)
    console.print(_label("Config directory:", str(ide.config_dir)), soft_wrap=True)
    console.print(_label("Logs directory:", str(ide.logs_dir)), soft_wrap=True)

    if ide.vm_options is None:
        console.print(_label("VM options:", NOT_FOUND, "yellow"), soft_wrap=True)
    else:
        console.print(_label("VM options:", ""), soft_wrap=True)
        for option in ide.vm_options:
            console.print(Text("    " + option), soft_wrap=True)

    if ide.notification_port is None:
        console.print(_label("Notification port:", NOT_FOUND, "yellow"), soft_wrap=True)
    else:
        console.print(_label("Notification port:", str(ide.notification_port), "green"), soft_wrap=True)


def instances_to_json(instances: list[InstalledInstance]) -> dict[str, Any]:
    return {JSON_ROOT_KEY: [ide.to_dict() for ide in instances]}


def instance_to_json(ide: InstalledInstance) -> dict[str, Any]:
    return {JSON_ROOT_KEY: ide.to_dict()}


def print_json(data: Any) -> None:
    """Print data as indented JSON to stdout.

    Args:
        data: Any JSON-serializable data structure.
    """
    click.echo(json.dumps(data, indent=2))


def print_error(message: str) -> None:
    """Print a fatal error message to stderr."""
    err_console.print(Text.assemble(("Error: ", "bold red"), message), soft_wrap=True)
