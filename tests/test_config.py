from pathlib import Path

import pytest
from pydantic import ValidationError

from razao import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("RAZAO_JOURNAL_PATH", raising=False)
    monkeypatch.delenv("RAZAO_STRICT", raising=False)
    monkeypatch.delenv("RAZAO_CHART_PATH", raising=False)
    monkeypatch.delenv("RAZAO_LOG_LEVEL", raising=False)
    settings = Settings()
    assert settings.journal_path == Path("razao.json")
    assert settings.chart_path is None
    assert settings.strict is False
    assert settings.log_level == "WARNING"


def test_environment_variables(monkeypatch, tmp_path):
    monkeypatch.setenv("RAZAO_JOURNAL_PATH", str(tmp_path / "j.json"))
    monkeypatch.setenv("RAZAO_STRICT", "true")
    monkeypatch.setenv("RAZAO_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.journal_path == tmp_path / "j.json"
    assert settings.strict is True
    assert settings.log_level == "DEBUG"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
