# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
"""Tests for StockroomSettings."""

import pytest

from stockroom.config import Environment, StockroomSettings, get_settings
from stockroom.errors import ConfigError


def test_defaults():
    settings = StockroomSettings()
    assert settings.env is Environment.DEVELOPMENT
    assert settings.debug is False
    assert settings.description_separator == "/"
    assert not settings.is_production


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("STOCKROOM_ENV", "prod")
    monkeypatch.setenv("STOCKROOM_DEBUG", "1")
    monkeypatch.setenv("STOCKROOM_DESCRIPTION_SEPARATOR", " | ")
    settings = StockroomSettings()
    assert settings.env is Environment.PRODUCTION
    assert settings.is_production
    assert settings.debug is True
    assert settings.description_separator == " | "


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("STOCKROOM_ENV=test\n")
    assert StockroomSettings().env is Environment.TESTING


def test_invalid_environment(monkeypatch):
    monkeypatch.setenv("STOCKROOM_ENV", "staging")
    with pytest.raises(ConfigError) as exc_info:
        StockroomSettings()
    assert exc_info.value.context["provided_value"] == "staging"


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, Environment.DEVELOPMENT),
        ("Dev", Environment.DEVELOPMENT),
        ("testing", Environment.TESTING),
        (" PRODUCTION ", Environment.PRODUCTION),
    ],
)
def test_environment_from_string(value, expected):
    assert Environment.from_string(value) is expected


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
