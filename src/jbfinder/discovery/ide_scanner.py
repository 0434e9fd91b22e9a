"""Discovery scanner for installed JetBrains IDEs.

Every JetBrains IDE that has been run at least once leaves a versioned
directory under the platform's logs root. The scanner treats each such
directory as a candidate and resolves it into an ``InstalledInstance``.

Discovery Algorithm:
    1. Ask the platform profile for the logs root (fatal if unknown).
    2. List the immediate subdirectories of the logs root.
    3. For each candidate, derive logs/install/config directories from
       the profile and the product identity of the directory name.
    4. Read ``<config_dir>/<code>.vmoptions`` and, through it, the
       Toolbox notification port file.
    5. Filter by the presence of ``idea.log`` (unless verbose) or look up
       a single instance by exact name.
"""

from __future__ import annotations

import logging
from pathlib import Path

from jbfinder.discovery.models import DiscoveryCandidate, InstalledInstance
from jbfinder.discovery.platforms import PlatformProfile, current_profile
from jbfinder.discovery.product_registry import normalize_product_name
from jbfinder.discovery.vmoptions import read_notification_port, read_vm_options
from jbfinder.exceptions import BasePathError, EnumerationError, ToolNotFoundError

logger = logging.getLogger(__name__)

LOG_FILE_NAME = "idea.log"


def _has_log(logs_dir: Path) -> bool:
    """Whether ``idea.log`` exists; unreadable directories count as no log."""
    try:
        return (logs_dir / LOG_FILE_NAME).exists()
    except OSError as exc:
        logger.debug("Cannot check %s for %s: %s", logs_dir, LOG_FILE_NAME, exc)
        return False


class IDEScanner:
    """Discovers and resolves all JetBrains IDE instances on the system.

    Usage::

        scanner = IDEScanner()
        for ide in scanner.find_installations():
            print(f"{ide.name}: {ide.install_dir}")
    """

    def __init__(self, profile: PlatformProfile | None = None) -> None:
        self.profile = profile if profile is not None else current_profile()

    def _logs_root(self) -> Path:
        root = self.profile.logs_root()
        if root is None:
            raise BasePathError("Could not determine JetBrains base path")
        return root

    def scan_candidates(self, root: Path) -> list[DiscoveryCandidate]:
        """List the immediate subdirectories of ``root``.

        Args:
            root: The logs root.

        Returns:
            One candidate per subdirectory, in directory-listing order.
            Empty if ``root`` does not exist.

        Raises:
            EnumerationError: If ``root`` exists but cannot be listed.
        """
        candidates: list[DiscoveryCandidate] = []
        try:
            if not root.is_dir():
                logger.debug("Logs root %s does not exist", root)
                return candidates
            for entry in root.iterdir():
                if entry.is_symlink() or not entry.is_dir():
                    continue
                candidates.append(DiscoveryCandidate(name=entry.name, path=entry))
        except OSError as exc:
            raise EnumerationError(f"Failed to list {root}: {exc}") from exc
        return candidates

    def resolve(self, candidate: DiscoveryCandidate) -> InstalledInstance:
        """Resolve one candidate into a fully or partially populated record."""
        identity = normalize_product_name(candidate.name)
        logs_dir = self.profile.logs_dir_for(candidate.path)
        install_dir = self.profile.install_dir_for(identity.display_name)
        config_dir = self.profile.config_root() / candidate.name

        vm_options = read_vm_options(config_dir / f"{identity.code}.vmoptions")
        notification_port = read_notification_port(vm_options)

        logger.debug(
            "Resolved %s (product=%s, vmoptions=%s, port=%s)",
            candidate.name, identity.display_name,
            "found" if vm_options is not None else "missing", notification_port,
        )
        return InstalledInstance(
            name=candidate.name,
            product=identity,
            logs_dir=logs_dir,
            install_dir=install_dir,
            config_dir=config_dir,
            vm_options=vm_options,
            notification_port=notification_port,
            has_log=_has_log(logs_dir),
        )

    def find_installations(self) -> list[InstalledInstance]:
        """Scan the logs root and resolve every candidate.

        Returns:
            One instance per logs-root subdirectory, unfiltered.

        Raises:
            BasePathError: If the logs root cannot be determined.
            EnumerationError: If the logs root cannot be listed.
        """
        root = self._logs_root()
        return [self.resolve(candidate) for candidate in self.scan_candidates(root)]


def list_installations(
    instances: list[InstalledInstance], verbose: bool = False,
) -> list[InstalledInstance]:
    """Return instances with an ``idea.log``, or all of them when verbose."""
    if verbose:
        return list(instances)
    return [ide for ide in instances if ide.has_log]


def get_installation(instances: list[InstalledInstance], name: str) -> InstalledInstance:
    """Return the instance whose name equals ``name`` exactly.

    Raises:
        ToolNotFoundError: If no instance has that name.
    """
    for ide in instances:
        if ide.name == name:
            return ide
    raise ToolNotFoundError(name)
