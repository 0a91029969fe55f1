"""Exception hierarchy for the HUD.ai client.

Every failure raised by the client derives from :class:`HudAiError`, so callers
can catch a single type or pick out the specific cases they care about.
"""

from typing import Any, Optional


class HudAiError(Exception):
    """Base exception for all HUD.ai client errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConfigurationError(HudAiError):
    """Exception raised when the client is missing required configuration."""

    pass


class AuthExchangeError(HudAiError):
    """Exception raised when a token exchange is rejected or cannot reach the server."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        grant_type: Optional[str] = None,
    ):
        super().__init__(message, status_code)
        self.grant_type = grant_type


class ApiError(HudAiError):
    """Exception raised when a resource endpoint answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int, body: Any = None):
        super().__init__(message, status_code)
        self.body = body


class NotFoundError(ApiError):
    """Exception raised when the requested entity does not exist (404)."""

    pass


class RateLimitError(ApiError):
    """Exception raised for rate limiting responses (429)."""

    def __init__(
        self,
        message: str,
        status_code: int = 429,
        body: Any = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(message, status_code, body)
        self.retry_after = retry_after


class ServerError(ApiError):
    """Exception raised for server-side errors (5xx responses)."""

    pass


class InvalidResponseError(HudAiError):
    """Exception raised when a 2xx response body does not match the expected shape."""

    def __init__(self, message: str, body: Any = None):
        super().__init__(message)
        self.body = body


class NetworkError(HudAiError):
    """Exception raised when a request produced no response at all."""

    def __init__(self, message: str, user_guidance: Optional[str] = None):
        super().__init__(message)
        self.user_guidance = user_guidance or ""


class NetworkConnectionError(NetworkError):
    """Exception raised for connection-related network failures."""

    pass


class NetworkTimeoutError(NetworkError):
    """Exception raised for timeout-related network failures."""

    pass


class DNSResolutionError(NetworkError):
    """Exception raised for DNS resolution failures."""

    pass


class SSLCertificateError(NetworkError):
    """Exception raised for SSL certificate verification failures."""

    pass
