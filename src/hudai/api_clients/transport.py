"""HTTP transport shared by the token exchanger and the request dispatcher."""

import logging
from typing import Any, Dict, Optional

import httpx

from .network_error_handler import NetworkErrorHandler

logger = logging.getLogger(__name__)


class HttpTransport:
    """Owns the httpx session and turns transport failures into NetworkErrors."""

    def __init__(
        self,
        timeout: float = 30.0,
        connect_timeout: float = 10.0,
        headers: Optional[Dict[str, str]] = None,
        verify: bool = True,
        follow_redirects: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the transport.

        Args:
            timeout: Read/write timeout in seconds
            connect_timeout: Connection timeout in seconds
            headers: Headers sent with every request
            verify: Verify SSL certificates
            follow_redirects: Follow HTTP redirects
            transport: Optional httpx transport (used to stub the network in tests)
        """
        self._timeout = httpx.Timeout(timeout, connect=connect_timeout)
        self._headers = dict(headers or {})
        self._verify = verify
        self._follow_redirects = follow_redirects
        self._transport = transport
        self._session: Optional[httpx.AsyncClient] = None
        self._network_error_handler = NetworkErrorHandler()

    @property
    def session(self) -> httpx.AsyncClient:
        """Get or create the HTTP session."""
        if self._session is None or self._session.is_closed:
            limits = httpx.Limits(
                max_connections=10,
                max_keepalive_connections=5,
                keepalive_expiry=30.0,
            )
            self._session = httpx.AsyncClient(
                timeout=self._timeout,
                limits=limits,
                headers={"Accept": "application/json", **self._headers},
                follow_redirects=self._follow_redirects,
                verify=self._verify,
                transport=self._transport,
            )
        return self._session

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send a request and return the response whatever its status.

        Raises:
            NetworkError: If no response was received
        """
        logger.debug(f"{method} {url}")
        try:
            return await self.session.request(method, url, **kwargs)
        except httpx.TransportError as e:
            raise self._network_error_handler.classify_network_error(e) from e

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.is_closed:
            await self._session.aclose()
        self._session = None
