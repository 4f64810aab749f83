"""Unit tests for /src/core/config.py"""

import pytest
from pydantic import ValidationError

from src.core.config import (
    DEFAULT_COUNTDOWN,
    LOG_FORMAT,
    Settings,
    configure_logging,
)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in [
        "SOS_INITIAL_COUNTDOWN",
        "SOS_TICK_INTERVAL_SEC",
        "SOS_DATABASE_URL",
        "SOS_LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings == Settings()
    assert settings.initial_countdown == DEFAULT_COUNTDOWN
    assert settings.tick_interval_sec == 1.0
    assert settings.database_url == "sqlite:///:memory:"
    assert settings.log_level == "INFO"


def test_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SOS_INITIAL_COUNTDOWN", "15")
    monkeypatch.setenv("SOS_TICK_INTERVAL_SEC", "0.5")
    monkeypatch.setenv("SOS_DATABASE_URL", "sqlite:///matches.db")
    monkeypatch.setenv("SOS_LOG_LEVEL", "debug")

    settings = Settings.from_env()
    assert settings.initial_countdown == 15
    assert settings.tick_interval_sec == 0.5
    assert settings.database_url == "sqlite:///matches.db"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [
        ("SOS_INITIAL_COUNTDOWN", "0"),
        ("SOS_INITIAL_COUNTDOWN", "ten"),
        ("SOS_TICK_INTERVAL_SEC", "0"),
        ("SOS_TICK_INTERVAL_SEC", "soon"),
    ],
)
def test_invalid_values(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings.from_env()


def test_configure_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings feed straight into the logging setup of a host application"""
    calls: list[dict] = []
    monkeypatch.setattr(
        "src.core.config.logging.basicConfig", lambda **kwargs: calls.append(kwargs)
    )
    configure_logging(Settings(log_level="DEBUG"))
    assert calls == [{"level": "DEBUG", "format": LOG_FORMAT}]
