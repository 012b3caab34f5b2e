"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from oxo.config import DEFAULT_CORS_ORIGINS, load_settings

ENV_VARS = ["OXO_ROWS", "OXO_COLUMNS", "OXO_PLAYERS", "OXO_WIN_THRESHOLD", "CORS_ORIGINS", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr("oxo.config.load_dotenv", lambda: False)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings.game.rows == 3
        assert settings.game.columns == 3
        assert settings.game.players == 2
        assert settings.game.win_threshold == 3
        assert settings.cors_origins == DEFAULT_CORS_ORIGINS.split(",")
        assert settings.log_level == "INFO"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("OXO_ROWS", "6")
        monkeypatch.setenv("OXO_COLUMNS", "7")
        monkeypatch.setenv("OXO_PLAYERS", "3")
        monkeypatch.setenv("OXO_WIN_THRESHOLD", "4")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = load_settings()
        assert (settings.game.rows, settings.game.columns) == (6, 7)
        assert settings.game.players == 3
        assert settings.game.win_threshold == 4
        assert settings.cors_origins == ["http://a.test", "http://b.test"]
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "name,value",
        [
            ("OXO_ROWS", "0"),
            ("OXO_ROWS", "27"),
            ("OXO_COLUMNS", "three"),
            ("OXO_COLUMNS", "10"),
            ("OXO_PLAYERS", "27"),
            ("OXO_WIN_THRESHOLD", "-1"),
            ("LOG_LEVEL", "verbose"),
        ],
    )
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            load_settings()
