"""RepoPulse SDK exception classes."""

RATE_LIMIT_MESSAGE = "GitHub API rate limit exceeded. Please try again later."
STATS_NOT_READY_MESSAGE = (
    "Repository statistics are not available. This may happen if the "
    "repository is empty or was just created."
)


class RepoPulseError(Exception):
    """Base exception for all RepoPulse SDK errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(RepoPulseError):
    """Raised when SDK configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class InvalidArgumentError(RepoPulseError):
    """Raised when a caller passes a malformed owner, repository or page."""

    def __init__(self, message: str) -> None:
        super().__init__("INVALID_ARGUMENT", message)


class NetworkError(RepoPulseError):
    """Raised when the request fails before any response arrives."""

    def __init__(self, message: str) -> None:
        super().__init__("NETWORK_ERROR", message)


class HttpError(RepoPulseError):
    """Raised on a non-2xx response."""

    code_name = "HTTP_ERROR"

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(self.code_name, message)
        self.status_code = status_code


class RateLimitError(HttpError):
    """Raised when the API quota is exhausted."""

    code_name = "RATE_LIMITED"

    def __init__(
        self,
        status_code: int,
        message: str = RATE_LIMIT_MESSAGE,
        retry_after: int | None = None,
        reset_at: int | None = None,
        remaining: int | None = None,
    ) -> None:
        super().__init__(status_code, message)
        self.retry_after = retry_after
        self.reset_at = reset_at  # Unix timestamp when the quota resets
        self.remaining = remaining


class UnprocessableError(HttpError):
    """Raised on 422: statistics not ready or the repository is empty."""

    code_name = "UNPROCESSABLE"

    def __init__(self, status_code: int = 422, message: str = STATS_NOT_READY_MESSAGE) -> None:
        super().__init__(status_code, message)
