"""Shared fixtures for CLI tests.

CLI tests point the ``jbfinder`` group at temporary roots through the
``--logs-root`` / ``--config-root`` options, so the layout built with the
discovery helpers is what the commands see.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.discovery.helpers import FakeProfile


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def root_args(fake_profile: FakeProfile) -> list[str]:
    """Group options that redirect discovery into ``fake_profile``'s roots."""
    logs_root = fake_profile.logs_root()
    assert logs_root is not None
    return [
        "--logs-root", str(logs_root),
        "--config-root", str(fake_profile.config_root()),
    ]


@pytest.fixture
def logs_root(fake_profile: FakeProfile) -> Path:
    root = fake_profile.logs_root()
    assert root is not None
    return root
