"""Shared test helpers for creating fake JetBrains directory layouts.

``FakeProfile`` is a test-only platform profile whose logs, config and
install roots all live under a temporary directory. The ``create_*``
helpers lay out realistic product directories inside it. These are used
by the discovery, CLI and property tests.
"""

from __future__ import annotations

from pathlib import Path

from jbfinder.discovery.platforms import HostEnvironment, PlatformProfile
from jbfinder.discovery.vmoptions import PORT_FILE_DIRECTIVE


class FakeProfile(PlatformProfile):
    """Linux-like layout under ``base``: ``logs/``, ``config/``, ``apps/``."""

    name = "fake"

    def __init__(self, base: Path) -> None:
        home = base / "home"
        super().__init__(HostEnvironment(environ={}, home_provider=lambda: home))
        self.base = base

    def logs_root(self) -> Path | None:
        return self.base / "logs"

    def config_root(self) -> Path:
        return self.base / "config"

    def install_roots(self) -> list[Path]:
        return [self.base / "apps"]


def create_logs_dir(profile: PlatformProfile, name: str, with_log: bool = True) -> Path:
    """Create ``<logs_root>/<name>`` and optionally its ``idea.log``."""
    root = profile.logs_root()
    assert root is not None
    candidate = root / name
    logs_dir = profile.logs_dir_for(candidate)
    logs_dir.mkdir(parents=True, exist_ok=True)
    if with_log:
        (logs_dir / "idea.log").write_text("2024-11-02 10:00:00,000 [  1] INFO - startup\n")
    return candidate


def create_vmoptions(profile: PlatformProfile, name: str, code: str, content: str) -> Path:
    """Write ``<config_root>/<name>/<code>.vmoptions``."""
    config_dir = profile.config_root() / name
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / f"{code}.vmoptions"
    path.write_text(content)
    return path


def create_port_file(path: Path, content: str = "63342\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


def port_directive(port_file: Path) -> str:
    return f"{PORT_FILE_DIRECTIVE}{port_file}"


def create_idea_home(profile: PlatformProfile, port_file: Path | None = None) -> None:
    """Create a used IntelliJ IDEA 2024.3 with vmoptions and a port file."""
    create_logs_dir(profile, "IntelliJIdea2024.3")
    lines = ["# custom IDE options", "-Xmx2048m", "", "-XX:+UseG1GC"]
    if port_file is not None:
        create_port_file(port_file)
        lines.append(port_directive(port_file))
    create_vmoptions(profile, "IntelliJIdea2024.3", "idea", "\n".join(lines) + "\n")
