"""Data models for the discovery module.

Contains the records produced by ``IDEScanner``: the ephemeral scan
candidate and the fully resolved installed-instance record.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jbfinder.discovery.product_registry import ProductIdentity


@dataclass(frozen=True)
class DiscoveryCandidate:
    """One immediate subdirectory of the logs root."""

    name: str
    path: Path


@dataclass
class InstalledInstance:
    """A single JetBrains IDE instance discovered on the system.

    Attributes:
        name: Raw versioned directory name (e.g., "GoLand2024.3"). Unique
            within one scan and used as the lookup key.
        product: Identity derived from ``name``.
        logs_dir: Directory expected to hold ``idea.log``.
        install_dir: Application directory (may not exist on disk).
        config_dir: Per-version configuration directory.
        vm_options: Effective lines of the vmoptions file, or None when
            the file is missing or unreadable.
        notification_port: Port advertised through the Toolbox port file.
        has_log: Whether ``idea.log`` existed in ``logs_dir`` at scan time.
    """

    name: str
    product: ProductIdentity
    logs_dir: Path
    install_dir: Path
    config_dir: Path
    vm_options: list[str] | None = None
    notification_port: int | None = None
    has_log: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict with string paths."""
        return {
            "name": self.name,
            "product": self.product.display_name,
            "install_dir": str(self.install_dir),
            "config_dir": str(self.config_dir),
            "logs_dir": str(self.logs_dir),
            "vm_options": list(self.vm_options) if self.vm_options is not None else None,
            "notification_port": self.notification_port,
            "has_log": self.has_log,
        }
