"""Test rulecheck version and basic imports."""

from importlib.metadata import version

import rulecheck
from rulecheck import __version__


class TestVersion:
    """Tests for rulecheck version and package structure."""

    def test_version_is_defined(self) -> None:
        """Verify that __version__ matches pyproject.toml."""
        # Given - version from pyproject.toml via package metadata
        expected = version("rulecheck")

        # When
        actual = __version__

        # Then
        assert actual == expected

    def test_public_api_is_exported(self) -> None:
        """Verify every name in __all__ is importable from the package."""
        # When/Then
        for name in rulecheck.__all__:
            assert hasattr(rulecheck, name)
