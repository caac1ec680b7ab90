"""
Tests for application settings.

Tests cover:
- Defaults
- Environment variable overrides
"""

import pytest

from compass.config.settings import Settings


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without overrides the documented defaults apply."""
        monkeypatch.delenv("DISABLE_ANALYSIS_LOGGING", raising=False)
        monkeypatch.delenv("SCAN_DEPTH", raising=False)

        settings = Settings(_env_file=None)

        assert settings.disable_analysis_logging is False
        assert settings.scan_depth == 10
        assert settings.structure_depth == 3
        assert settings.tree_command == "tree"

    @pytest.mark.parametrize("value", ["true", "1", "TRUE"])
    def test_disable_analysis_logging_from_env(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """DISABLE_ANALYSIS_LOGGING turns the phase banner off."""
        monkeypatch.setenv("DISABLE_ANALYSIS_LOGGING", value)
        assert Settings(_env_file=None).disable_analysis_logging is True

    def test_env_names_are_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Lower-case environment names work as well."""
        monkeypatch.setenv("scan_depth", "4")
        assert Settings(_env_file=None).scan_depth == 4
