"""Shared pytest fixtures for child-support calculator tests."""

import pytest

from unterhalt_rechner.core.config import set_config_path
from unterhalt_rechner.core.tables import DUESSELDORF_2025


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Each test gets its own config.json path. Resets the cached config after."""
    config_path = tmp_path / "config.json"
    set_config_path(str(config_path))
    yield config_path
    set_config_path(None)


@pytest.fixture
def table():
    return DUESSELDORF_2025
