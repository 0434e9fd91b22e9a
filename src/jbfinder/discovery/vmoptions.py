"""Readers for ``.vmoptions`` files and the Toolbox notification port file.

Each step of the chain (vmoptions file, port-file directive, port value)
may be missing. Every reader here returns None on the first absent or
unreadable link instead of raising; the underlying ``OSError`` is only
logged at DEBUG level.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

PORT_FILE_DIRECTIVE = "-Dtoolbox.notification.portFile="

_MAX_PORT = 65535
_PORT_RE = re.compile(r"\+?0*([0-9]{1,5})")


def _read_text(path: Path) -> str | None:
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return None


def parse_vm_options(content: str) -> list[str]:
    """Return the effective lines of vmoptions content.

    Lines are split on ``\\n`` or ``\\r\\n``. Lines that are blank or start
    with ``#`` once stripped are dropped; kept lines are not stripped.
    """
    options: list[str] = []
    for line in content.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        options.append(line)
    return options


def read_vm_options(path: Path) -> list[str] | None:
    """Read and filter a vmoptions file, or None if it cannot be read."""
    content = _read_text(path)
    if content is None:
        return None
    return parse_vm_options(content)


def find_port_file(vm_options: list[str]) -> Path | None:
    """Return the path named by the first port-file directive, if any."""
    for option in vm_options:
        if option.startswith(PORT_FILE_DIRECTIVE):
            return Path(option[len(PORT_FILE_DIRECTIVE):])
    return None


def parse_port(text: str) -> int | None:
    """Parse an unsigned 16-bit port number; None if invalid or out of range."""
    value = text.strip()
    match = _PORT_RE.fullmatch(value)
    if match is None:
        return None
    port = int(match.group(1))
    return port if port <= _MAX_PORT else None


def read_notification_port(vm_options: list[str] | None) -> int | None:
    """Resolve the notification port advertised through ``vm_options``."""
    if vm_options is None:
        return None
    port_file = find_port_file(vm_options)
    if port_file is None:
        return None
    content = _read_text(port_file)
    if content is None:
        return None
    port = parse_port(content)
    if port is None:
        logger.debug("Invalid port in %s: %r", port_file, content)
    return port
