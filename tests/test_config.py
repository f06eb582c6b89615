"""
Tests for CLI settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from plurals.config import Settings


class TestSettings:
    """Tests for Settings.from_env."""

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.language == "en"
        assert settings.dictionary is None
        assert settings.verbose is False

    def test_environment(self):
        settings = Settings.from_env(
            {
                "PLURALS_LANGUAGE": "Russian",
                "PLURALS_DICTIONARY": "/tmp/words.txt",
                "PLURALS_VERBOSE": "yes",
            }
        )
        assert settings.language == "ru"
        assert settings.dictionary == Path("/tmp/words.txt")
        assert settings.verbose is True

    def test_blank_environment_ignored(self):
        settings = Settings.from_env({"PLURALS_LANGUAGE": "  ", "PLURALS_VERBOSE": "0"})
        assert settings.language == "en"
        assert settings.verbose is False

    def test_overrides_win(self):
        settings = Settings.from_env({"PLURALS_LANGUAGE": "ru"}, language="fr", dictionary=None)
        assert settings.language == "fr"
        assert settings.dictionary is None

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("PLURALS_LANGUAGE", "de")
        assert Settings.from_env().language == "de"

    def test_unknown_language(self):
        with pytest.raises(ValidationError):
            Settings.from_env({"PLURALS_LANGUAGE": "tlh"})

    def test_frozen(self):
        settings = Settings.from_env({})
        with pytest.raises(ValidationError):
            settings.language = "ru"
