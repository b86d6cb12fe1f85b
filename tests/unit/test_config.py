"""Unit tests for application settings."""

from responder_analysis.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    settings = Settings(_env_file=None)

    assert settings.log_level == "INFO"
    assert settings.debug is False
    assert settings.json_indent == 2


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_INDENT", "4")

    settings = Settings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.json_indent == 4


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
