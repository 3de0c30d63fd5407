"""Module to store common fixtures. """

from pathlib import Path

import pytest

from kioskmap.config import reset_config


@pytest.fixture(scope="session")
def base_dir() -> Path:
    return Path(__file__).parent


@pytest.fixture(autouse=True)
def clean_config():
    """Make sure all config changes are reverted for next tests."""
    try:
        yield
    finally:
        reset_config()
