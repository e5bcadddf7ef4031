"""
RepoPulse SDK configuration.

Holds the pre-resolved API settings (base URL, auth switch, token) and the
rules deciding whether a token is actually sent.
"""

import os
from dataclasses import dataclass

from repopulse.exceptions import ConfigurationError

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0

# Value shipped in sample configs; treated the same as no token at all
TOKEN_PLACEHOLDER = "your_github_token_here"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}")


@dataclass
class ApiConfig:
    """Settings for talking to the repository hosting API."""

    api_base_url: str = DEFAULT_API_URL
    use_auth: bool = True
    api_token: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = "repopulse"

    def __post_init__(self) -> None:
        if not self.api_base_url or not self.api_base_url.strip():
            raise ConfigurationError("api_base_url must not be empty")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        self.api_base_url = self.api_base_url.strip().rstrip("/")

    @property
    def auth_token(self) -> str | None:
        """The token to attach to requests, or None for anonymous access."""
        if not self.use_auth or not self.api_token:
            return None
        token = self.api_token.strip()
        if not token or token == TOKEN_PLACEHOLDER:
            return None
        return token

    @property
    def needs_token(self) -> bool:
        """True when auth is enabled but no usable token is configured."""
        return self.use_auth and self.auth_token is None

    @classmethod
    def from_env(cls) -> "ApiConfig":
        """
        Create a configuration from environment variables.

        Environment variables:
            REPOPULSE_API_URL: Base URL for the API (optional, default: https://api.github.com)
            REPOPULSE_USE_AUTH: Whether to send a token (optional, default: true)
            GITHUB_TOKEN / REPOPULSE_API_TOKEN: Personal access token (optional)
            REPOPULSE_TIMEOUT: Request timeout in seconds (optional, default: 30)

        Raises:
            ConfigurationError: If a value cannot be parsed
        """
        base_url = os.environ.get("REPOPULSE_API_URL", DEFAULT_API_URL)
        use_auth_raw = os.environ.get("REPOPULSE_USE_AUTH")
        token = os.environ.get("REPOPULSE_API_TOKEN") or os.environ.get("GITHUB_TOKEN")
        timeout_raw = os.environ.get("REPOPULSE_TIMEOUT")

        use_auth = True
        if use_auth_raw is not None:
            use_auth = _parse_bool("REPOPULSE_USE_AUTH", use_auth_raw)

        timeout = DEFAULT_TIMEOUT
        if timeout_raw is not None:
            try:
                timeout = float(timeout_raw)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid REPOPULSE_TIMEOUT: {timeout_raw!r}"
                ) from e

        return cls(
            api_base_url=base_url,
            use_auth=use_auth,
            api_token=token,
            timeout=timeout,
        )
