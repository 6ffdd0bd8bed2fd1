"""
Tests for constants.
"""

from ngxlex import __version__
from ngxlex.const import APP_NAME, APP_VERSION, DEFAULT_CHUNK_SIZE, DEFAULT_ENCODING


def test_constants():
    """Test that constants are defined."""
    assert APP_NAME == "ngxlex"
    assert APP_VERSION == "0.1.0"
    assert DEFAULT_CHUNK_SIZE > 0
    assert DEFAULT_ENCODING == "utf-8"


def test_version_matches_constant():
    assert __version__ == APP_VERSION
