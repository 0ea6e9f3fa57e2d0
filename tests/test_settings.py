"""Tests for environment driven settings."""

import pytest

from rundeck_importer.config.settings import LogLevel, RundeckSettings, Settings
from rundeck_importer.core.exceptions import ConfigurationException

RUNDECK_VARS = [
    "RUNDECK_URL",
    "RUNDECK_TOKEN",
    "RUNDECK_USERNAME",
    "RUNDECK_PASSWORD",
    "RUNDECK_API_VERSION",
    "RUNDECK_INSECURE_SSL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in RUNDECK_VARS:
        monkeypatch.delenv(var, raising=False)


def test_settings_read_rundeck_environment(monkeypatch):
    monkeypatch.setenv("RUNDECK_URL", "https://rundeck.local")
    monkeypatch.setenv("RUNDECK_TOKEN", "abc")
    monkeypatch.setenv("RUNDECK_INSECURE_SSL", "true")

    settings = RundeckSettings()

    assert settings.url == "https://rundeck.local"
    assert settings.api_version == "38"
    assert settings.as_provider_args() == ["https://rundeck.local", "abc", "", "", "38", "true"]


def test_empty_api_version_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("RUNDECK_API_VERSION", "")

    assert RundeckSettings().api_version == "38"


def test_validate_auth_requires_url():
    with pytest.raises(ConfigurationException, match="RUNDECK_URL"):
        RundeckSettings(token="abc").validate_auth()


def test_validate_auth_requires_token_or_both_credentials():
    with pytest.raises(ConfigurationException, match="RUNDECK_TOKEN"):
        RundeckSettings(url="https://rundeck.local", username="admin").validate_auth()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"token": "abc"},
        {"username": "admin", "password": "pw"},
    ],
)
def test_validate_auth_accepts_one_auth_mode(kwargs):
    RundeckSettings(url="https://rundeck.local", **kwargs).validate_auth()


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Settings().log_level == LogLevel.DEBUG
