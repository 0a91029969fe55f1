"""Network Error Handler for the HUD.ai client.

Classifies httpx transport failures into the client's ``NetworkError`` family
and non-2xx responses into the ``ApiError`` family, attaching user guidance
that the CLI can render.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Type, cast

import httpx

from .exceptions import (
    ApiError,
    DNSResolutionError,
    NetworkConnectionError,
    NetworkError,
    NetworkTimeoutError,
    NotFoundError,
    RateLimitError,
    ServerError,
    SSLCertificateError,
)

logger = logging.getLogger(__name__)


@dataclass
class UserGuidance:
    """User guidance information for network errors."""

    error_type: str
    troubleshooting_steps: List[str]
    additional_notes: List[str] = field(default_factory=list)

    def format_for_console(self) -> str:
        """Format guidance for rich console output."""
        content = [f"[bold red]Error Type:[/bold red] {self.error_type}", ""]
        content.append("[bold yellow]Troubleshooting Steps:[/bold yellow]")

        for i, step in enumerate(self.troubleshooting_steps, 1):
            content.append(f"{i}. {step}")

        if self.additional_notes:
            content.append("")
            content.append("[bold blue]Additional Notes:[/bold blue]")
            for note in self.additional_notes:
                content.append(f"• {note}")

        return "\n".join(content)


class UserGuidanceProvider:
    """Provides user guidance for different network error scenarios."""

    def __init__(self):
        self._guidance_mapping: Dict[Type[Exception], Callable[[], UserGuidance]] = {
            NetworkConnectionError: self._get_connection_error_guidance,
            DNSResolutionError: self._get_dns_resolution_guidance,
            SSLCertificateError: self._get_ssl_certificate_guidance,
            NetworkTimeoutError: self._get_timeout_guidance,
        }

    def get_guidance(self, error: Exception) -> UserGuidance:
        """Get user guidance for a specific error."""
        guidance_func = self._guidance_mapping.get(
            type(error), self._get_generic_guidance
        )
        return cast(UserGuidance, guidance_func())

    def _get_connection_error_guidance(self) -> UserGuidance:
        return UserGuidance(
            error_type="Network Connection Error",
            troubleshooting_steps=[
                "Check that the HUD.ai API URL is correct",
                "Verify network connectivity to the server",
                "Check your firewall or proxy settings",
            ],
            additional_notes=[
                "This error typically indicates the server is not reachable",
            ],
        )

    def _get_dns_resolution_guidance(self) -> UserGuidance:
        return UserGuidance(
            error_type="DNS Resolution Error",
            troubleshooting_steps=[
                "Check your internet connection",
                "Verify the server hostname in base_api_url / base_auth_url",
                "Check your DNS server settings",
            ],
            additional_notes=["DNS resolution issues are often temporary"],
        )

    def _get_ssl_certificate_guidance(self) -> UserGuidance:
        return UserGuidance(
            error_type="SSL Certificate Error",
            troubleshooting_steps=[
                "Check if the server certificate is valid and not expired",
                "Verify the server hostname matches the certificate",
                "Check if you need to update your certificate store",
            ],
            additional_notes=[
                "Do not disable certificate verification without proper security review",
            ],
        )

    def _get_timeout_guidance(self) -> UserGuidance:
        return UserGuidance(
            error_type="Network Timeout Error",
            troubleshooting_steps=[
                "Try again - this may be a temporary issue",
                "Check your network connection speed and stability",
                "Increase request.timeout in the client configuration",
            ],
        )

    def _get_generic_guidance(self) -> UserGuidance:
        return UserGuidance(
            error_type="Unknown Network Error",
            troubleshooting_steps=[
                "Check your network connection",
                "Verify the server is accessible",
                "Try again in a few minutes",
            ],
        )


class NetworkErrorHandler:
    """Maps httpx failures and error responses onto client exceptions."""

    def __init__(self):
        self.guidance_provider = UserGuidanceProvider()
        self._dns_error_patterns = [
            r"name.*resolution.*failed",
            r"name.*or.*service.*not.*known",
            r"nodename.*nor.*servname.*provided",
            r"temporary.*failure.*in.*name.*resolution",
        ]
        self._ssl_error_patterns = [
            r"ssl.*certificate.*verification.*failed",
            r"certificate.*verify.*failed",
            r"ssl.*handshake.*failed",
            r"bad.*certificate",
        ]

    def classify_network_error(self, error: Exception) -> NetworkError:
        """Classify a transport failure into a specific ``NetworkError``.

        Args:
            error: The original httpx exception

        Returns:
            The client exception to raise in its place
        """
        error_message = str(error).lower()

        if isinstance(error, httpx.TimeoutException):
            if isinstance(error, httpx.ConnectTimeout):
                network_error: NetworkError = NetworkTimeoutError(
                    "Connection timed out. Check your network connection or try again later."
                )
            else:
                network_error = NetworkTimeoutError(
                    "Request timed out. Check your network connection or try again later."
                )
        elif self._matches(self._dns_error_patterns, error_message):
            network_error = DNSResolutionError(
                "Cannot resolve server address. Check your internet connection and server URL."
            )
        elif self._matches(self._ssl_error_patterns, error_message):
            network_error = SSLCertificateError(
                "SSL certificate verification failed. Server may be using invalid certificate."
            )
        elif isinstance(error, httpx.ConnectError):
            network_error = NetworkConnectionError(f"Connection failed: {error}")
        else:
            network_error = NetworkConnectionError(f"Network error: {error}")

        logger.debug(
            f"Classified {type(error).__name__} as {type(network_error).__name__}"
        )
        guidance = self.guidance_provider.get_guidance(network_error)
        network_error.user_guidance = guidance.format_for_console()
        return network_error

    def classify_response_error(self, response: httpx.Response) -> ApiError:
        """Build the ``ApiError`` matching a non-2xx response.

        Args:
            response: Response with a status code outside 200-299

        Returns:
            ``NotFoundError`` for 404, ``RateLimitError`` for 429,
            ``ServerError`` for 5xx and a plain ``ApiError`` otherwise
        """
        status_code = response.status_code
        body = parse_body(response)
        error_detail = extract_error_detail(body, status_code)

        if status_code == 404:
            return NotFoundError(error_detail, status_code, body)

        if status_code == 429:
            retry_after = None
            if "Retry-After" in response.headers:
                try:
                    retry_after = int(response.headers["Retry-After"])
                except ValueError:
                    retry_after = 60
            return RateLimitError(
                error_detail, status_code, body, retry_after=retry_after
            )

        if 500 <= status_code < 600:
            return ServerError(
                f"Server is experiencing issues: {error_detail}", status_code, body
            )

        return ApiError(error_detail, status_code, body)

    @staticmethod
    def _matches(patterns: List[str], message: str) -> bool:
        return any(re.search(pattern, message) for pattern in patterns)


def parse_body(response: httpx.Response) -> Any:
    """Parse a response body as JSON, falling back to text.

    Empty bodies (e.g. 204 No Content) parse to ``None``.
    """
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text


def extract_error_detail(body: Any, status_code: int) -> str:
    """Pull the server-provided message out of an error body."""
    if isinstance(body, dict):
        for key in ("message", "detail", "error_description", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    if isinstance(body, str) and body.strip():
        return body.strip()
    return f"HTTP {status_code}"

