"""Per-platform path conventions for JetBrains IDEs.

A ``PlatformProfile`` answers every question that depends on the running
operating system: where log directories live, where per-product config
directories live, where applications are installed, and how a raw
candidate directory maps to its log directory. The profile is selected
once with ``current_profile()`` and passed to the scanner, so no other
module branches on the platform.

Platform Notes:
    macOS keeps logs directly in ``~/Library/Logs/JetBrains/<Product>``.
    Windows and Linux add a ``log`` subdirectory below each product dir.
    Windows derives its roots from ``LOCALAPPDATA`` and ``APPDATA``
    instead of the home directory.
"""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping

VENDOR_DIR = "JetBrains"


def _default_home() -> Path | None:
    """Return the user's home directory, or None if it cannot be determined."""
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


@dataclass(frozen=True)
class HostEnvironment:
    """Read-only view of the host: environment variables and home directory.

    Attributes:
        environ: Environment variable mapping (defaults to ``os.environ``).
        home_provider: Callable returning the home directory or None.
    """

    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)
    home_provider: Callable[[], Path | None] = _default_home

    def home(self) -> Path | None:
        return self.home_provider()

    def getenv(self, key: str) -> str | None:
        value = self.environ.get(key)
        return value if value else None


class PlatformProfile:
    """Base profile. Subclasses fill in the platform-specific roots."""

    name: str = "generic"
    install_suffix: str = ""

    def __init__(self, host: HostEnvironment | None = None) -> None:
        self.host = host if host is not None else HostEnvironment()

    def logs_root(self) -> Path | None:
        """Directory whose immediate children are per-product log dirs."""
        raise NotImplementedError

    def config_root(self) -> Path:
        """Directory whose immediate children are per-product config dirs."""
        raise NotImplementedError

    def install_roots(self) -> list[Path]:
        """Ordered candidate directories that hold installed applications."""
        raise NotImplementedError

    def logs_dir_for(self, candidate: Path) -> Path:
        return candidate / "log"

    def install_root(self) -> Path:
        """First existing install root, or the first candidate unchecked."""
        roots = self.install_roots()
        if len(roots) > 1:
            for root in roots:
                try:
                    if root.is_dir():
                        return root
                except OSError:
                    continue
        return roots[0]

    def install_dir_for(self, display_name: str) -> Path:
        dirname = display_name
        if self.install_suffix and not dirname.endswith(self.install_suffix):
            dirname += self.install_suffix
        return self.install_root() / dirname

    def _home_relative(self, relative: str) -> Path | None:
        home = self.host.home()
        return home / relative if home is not None else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MacOSProfile(PlatformProfile):
    """macOS: ``~/Library`` layout and ``.app`` bundles."""

    name = "macos"
    install_suffix = ".app"

    def logs_root(self) -> Path | None:
        return self._home_relative(f"Library/Logs/{VENDOR_DIR}")

    def config_root(self) -> Path:
        root = self._home_relative(f"Library/Application Support/{VENDOR_DIR}")
        return root if root is not None else Path("~") / "Library" / "Application Support" / VENDOR_DIR

    def install_roots(self) -> list[Path]:
        roots = [Path("/Applications")]
        user_apps = self._home_relative("Applications")
        if user_apps is not None:
            roots.append(user_apps)
        return roots

    def logs_dir_for(self, candidate: Path) -> Path:
        return candidate


class WindowsProfile(PlatformProfile):
    """Windows: roots derived from ``LOCALAPPDATA`` and ``APPDATA``."""

    name = "windows"

    def logs_root(self) -> Path | None:
        local = self.host.getenv("LOCALAPPDATA")
        return Path(local) / VENDOR_DIR if local is not None else None

    def config_root(self) -> Path:
        # Unresolved APPDATA keeps the literal placeholder in the path.
        appdata = self.host.getenv("APPDATA") or "%APPDATA%"
        return Path(appdata) / VENDOR_DIR

    def install_roots(self) -> list[Path]:
        return [Path("C:\\Program Files") / VENDOR_DIR]


class LinuxProfile(PlatformProfile):
    """Linux and any unrecognized system: XDG-style dot-directories."""

    name = "linux"

    def logs_root(self) -> Path | None:
        return self._home_relative(f".cache/{VENDOR_DIR}")

    def config_root(self) -> Path:
        root = self._home_relative(f".config/{VENDOR_DIR}")
        return root if root is not None else Path("~") / ".config" / VENDOR_DIR

    def install_roots(self) -> list[Path]:
        return [Path("/opt")]


class OverrideProfile(PlatformProfile):
    """Wraps another profile, replacing its logs and/or config root.

    Used by the CLI's ``--logs-root`` and ``--config-root`` options.
    Everything not overridden is delegated to the wrapped profile.
    """

    def __init__(
        self,
        base: PlatformProfile,
        logs_root: Path | None = None,
        config_root: Path | None = None,
    ) -> None:
        super().__init__(base.host)
        self.base = base
        self.name = base.name
        self.install_suffix = base.install_suffix
        self._logs_root = logs_root
        self._config_root = config_root

    def logs_root(self) -> Path | None:
        return self._logs_root if self._logs_root is not None else self.base.logs_root()

    def config_root(self) -> Path:
        return self._config_root if self._config_root is not None else self.base.config_root()

    def install_roots(self) -> list[Path]:
        return self.base.install_roots()

    def logs_dir_for(self, candidate: Path) -> Path:
        return self.base.logs_dir_for(candidate)

    def __repr__(self) -> str:
        return f"OverrideProfile({self.base!r})"


_PROFILES: dict[str, type[PlatformProfile]] = {
    "darwin": MacOSProfile,
    "windows": WindowsProfile,
    "linux": LinuxProfile,
}


def current_profile(host: HostEnvironment | None = None) -> PlatformProfile:
    """Select the profile for the running system (unknown systems use Linux)."""
    system = platform.system().lower()
    profile_cls = _PROFILES.get(system, LinuxProfile)
    return profile_cls(host)
