"""Shared fixtures for jbfinder tests."""

import pathlib

import pytest

from tests.discovery.helpers import FakeProfile


@pytest.fixture
def fake_profile(tmp_path: pathlib.Path) -> FakeProfile:
    """A platform profile rooted entirely inside ``tmp_path``."""
    return FakeProfile(tmp_path)
