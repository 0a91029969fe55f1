"""Request Dispatcher: the single path every authenticated call takes."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .credentials import CredentialState
from .network_error_handler import NetworkErrorHandler, parse_body
from .serialization import Payload, serialize_payload
from .token_exchanger import TokenExchanger
from .transport import HttpTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestDescriptor:
    """One outbound API call, relative to the base API URL."""

    method: str
    url: str
    params: Optional[Payload] = None
    data: Optional[Payload] = None


class RequestDispatcher:
    """Authenticates, sends and decodes resource requests.

    No retries happen here; every failure propagates to the caller.
    """

    def __init__(
        self,
        base_api_url: str,
        state: CredentialState,
        exchanger: TokenExchanger,
        transport: HttpTransport,
    ):
        self.base_api_url = base_api_url.rstrip("/")
        self.state = state
        self.exchanger = exchanger
        self.transport = transport
        self._network_error_handler = NetworkErrorHandler()

    async def dispatch(self, descriptor: RequestDescriptor) -> Any:
        """Send a request described by ``descriptor``.

        Returns:
            Parsed JSON body, or None when the response has no content

        Raises:
            AuthExchangeError: If a required token exchange fails
            ApiError: If the server answers with a non-2xx status
            NetworkError: If no response is received
        """
        await self.exchanger.ensure_fresh_token()

        headers: Dict[str, str] = {}
        if self.state.access_token:
            headers["Authorization"] = f"Bearer {self.state.access_token}"

        kwargs: Dict[str, Any] = {"headers": headers}
        params = serialize_payload(descriptor.params)
        if params:
            kwargs["params"] = params
        if descriptor.data is not None:
            kwargs["json"] = serialize_payload(descriptor.data)

        response = await self.transport.request(
            descriptor.method, f"{self.base_api_url}{descriptor.url}", **kwargs
        )

        if not response.is_success:
            logger.debug(
                f"{descriptor.method} {descriptor.url} failed with HTTP {response.status_code}"
            )
            raise self._network_error_handler.classify_response_error(response)

        return parse_body(response)
