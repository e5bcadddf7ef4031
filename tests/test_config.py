"""
Tests for API configuration.

Feature: repopulse-sdk
"""

import pytest

from repopulse.config import DEFAULT_API_URL, TOKEN_PLACEHOLDER, ApiConfig
from repopulse.exceptions import ConfigurationError

ENV_VARS = [
    "REPOPULSE_API_URL",
    "REPOPULSE_USE_AUTH",
    "REPOPULSE_API_TOKEN",
    "GITHUB_TOKEN",
    "REPOPULSE_TIMEOUT",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults() -> None:
    config = ApiConfig()

    assert config.api_base_url == DEFAULT_API_URL
    assert config.use_auth is True
    assert config.auth_token is None
    assert config.needs_token is True


def test_placeholder_token_is_absent() -> None:
    config = ApiConfig(api_token=TOKEN_PLACEHOLDER)

    assert config.auth_token is None
    assert config.needs_token is True


def test_real_token_is_used() -> None:
    config = ApiConfig(api_token=" ghp_abc ")

    assert config.auth_token == "ghp_abc"
    assert config.needs_token is False


def test_auth_disabled_never_needs_token() -> None:
    config = ApiConfig(use_auth=False, api_token="ghp_abc")

    assert config.auth_token is None
    assert config.needs_token is False


def test_trailing_slash_stripped() -> None:
    assert ApiConfig(api_base_url="https://api.github.com/").api_base_url == "https://api.github.com"


@pytest.mark.parametrize("kwargs", [{"api_base_url": ""}, {"api_base_url": "  "}, {"timeout": 0}])
def test_invalid_values_rejected(kwargs: dict) -> None:
    with pytest.raises(ConfigurationError):
        ApiConfig(**kwargs)


def test_from_env_defaults(clean_env: pytest.MonkeyPatch) -> None:
    config = ApiConfig.from_env()

    assert config.api_base_url == DEFAULT_API_URL
    assert config.use_auth is True
    assert config.api_token is None


def test_from_env_reads_values(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("REPOPULSE_API_URL", "https://ghe.example.com/api/v3")
    clean_env.setenv("REPOPULSE_USE_AUTH", "yes")
    clean_env.setenv("GITHUB_TOKEN", "ghp_fromenv")
    clean_env.setenv("REPOPULSE_TIMEOUT", "5.5")

    config = ApiConfig.from_env()

    assert config.api_base_url == "https://ghe.example.com/api/v3"
    assert config.auth_token == "ghp_fromenv"
    assert config.timeout == 5.5


def test_from_env_prefers_sdk_token(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("GITHUB_TOKEN", "ghp_generic")
    clean_env.setenv("REPOPULSE_API_TOKEN", "ghp_specific")

    assert ApiConfig.from_env().auth_token == "ghp_specific"


@pytest.mark.parametrize("value", ["0", "false", "Off", "NO"])
def test_from_env_disables_auth(clean_env: pytest.MonkeyPatch, value: str) -> None:
    clean_env.setenv("REPOPULSE_USE_AUTH", value)

    assert ApiConfig.from_env().use_auth is False


@pytest.mark.parametrize(
    ("name", "value"),
    [("REPOPULSE_USE_AUTH", "maybe"), ("REPOPULSE_TIMEOUT", "soon"), ("REPOPULSE_TIMEOUT", "-1")],
)
def test_from_env_invalid_values(clean_env: pytest.MonkeyPatch, name: str, value: str) -> None:
    clean_env.setenv(name, value)

    with pytest.raises(ConfigurationError):
        ApiConfig.from_env()
