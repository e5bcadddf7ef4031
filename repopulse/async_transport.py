"""
Async HTTP Transport for RepoPulse SDK.

Handles async HTTP communication with the repository hosting API: default
headers, optional token authentication and parsing of error responses into
typed exceptions. One attempt per call; failures surface immediately.
"""

import time
from typing import Any

import httpx

from repopulse.config import ApiConfig
from repopulse.exceptions import (
    RATE_LIMIT_MESSAGE,
    HttpError,
    NetworkError,
    RateLimitError,
    UnprocessableError,
)
from repopulse.logging import get_logger, log_http_request, log_http_response

logger = get_logger("http")

ACCEPT_HEADER = "application/vnd.github.v3+json"


def _int_header(response: httpx.Response, name: str) -> int | None:
    value = response.headers.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class AsyncHTTPTransport:
    """
    Async HTTP transport layer for read-only API calls.

    Handles:
    - Versioned Accept header on every request
    - Authorization header only when a usable token is configured
    - Empty 2xx bodies (statistics still being computed)
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        config: ApiConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            config: API settings (default: anonymous access to api.github.com)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.config = config or ApiConfig()
        self.base_url = self.config.api_base_url

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.config.timeout,
            headers=self._default_headers(),
            follow_redirects=True,
            transport=transport,
        )

        if self.config.needs_token:
            logger.info("No GitHub token configured; using unauthenticated requests")

    def _default_headers(self) -> dict[str, str]:
        headers = {
            "Accept": ACCEPT_HEADER,
            "User-Agent": self.config.user_agent,
        }
        token = self.config.auth_token
        if token:
            headers["Authorization"] = f"token {token}"
        return headers

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a single GET request.

        Args:
            path: API path (e.g., "/search/repositories")
            params: Query parameters

        Returns:
            Parsed JSON response, or None when the server sent no body

        Raises:
            RateLimitError: On 429, or 403 with no quota left (or no quota header)
            UnprocessableError: On 422
            HttpError: On any other non-2xx status
            NetworkError: When no response was received
        """
        log_http_request("GET", f"{self.base_url}{path}", self._client.headers, params)
        started = time.perf_counter()

        try:
            response = await self._client.get(path, params=params)
        except httpx.RequestError as e:
            logger.warning("Request to %s failed: %s", path, e)
            raise NetworkError(str(e) or type(e).__name__) from e

        elapsed_ms = (time.perf_counter() - started) * 1000
        log_http_response(
            response.status_code,
            str(response.url),
            elapsed_ms=elapsed_ms,
            rate_limit_remaining=response.headers.get("x-ratelimit-remaining"),
        )

        if not response.is_success:
            raise self._parse_error_response(response)

        if response.status_code == 202:
            logger.debug("%s is still being computed (202 Accepted)", path)

        if not response.content:
            return None
        return response.json()

    def _parse_error_response(self, response: httpx.Response) -> HttpError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate HttpError subclass
        """
        status_code = response.status_code
        remaining = _int_header(response, "x-ratelimit-remaining")

        # A 403 that still reports quota is a permission error, not a rate limit
        if status_code == 429 or (status_code == 403 and not remaining):
            return RateLimitError(
                status_code,
                RATE_LIMIT_MESSAGE,
                retry_after=_int_header(response, "Retry-After"),
                reset_at=_int_header(response, "x-ratelimit-reset"),
                remaining=remaining,
            )
        if status_code == 422:
            return UnprocessableError(status_code)

        try:
            data = response.json()
        except Exception:
            data = {}

        message = data.get("message") if isinstance(data, dict) else None
        if not message:
            message = f"HTTP {status_code} {response.reason_phrase}".rstrip()
        return HttpError(status_code, message)
