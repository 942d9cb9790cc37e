"""Shared fixtures for hyprcursor tests."""

import pytest
from helpers import DEFAULT_META, png_bytes


@pytest.fixture
def search_root(tmp_path):
    """An empty icon search root."""
    root = tmp_path / "icons"
    root.mkdir()
    return root


@pytest.fixture
def default_cursor():
    """Meta and entries of a single-size png cursor."""
    return DEFAULT_META, {"default_24.png": png_bytes(24, 24)}


@pytest.fixture
def cairo():
    """Skip the test when cairosvg or the cairo library isn't available."""
    try:
        import cairosvg
    except (ImportError, OSError) as e:
        pytest.skip(f"cairosvg unavailable: {e}")
    return cairosvg
