"""Pytest fixtures for shellenv tests."""

import pytest

from shellenv.path_utils import is_msys2_environment


@pytest.fixture(autouse=True)
def clear_msys2_cache():
    """Clear the cached MSYS2 detection before and after each test.

    Tests that patch the platform or environment would otherwise see the
    answer computed by an earlier test.
    """
    is_msys2_environment.cache_clear()
    yield
    is_msys2_environment.cache_clear()


@pytest.fixture
def home(tmp_path):
    """An empty directory standing in for the user's home."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir
