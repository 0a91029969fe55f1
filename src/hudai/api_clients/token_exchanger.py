"""OAuth2 token exchange and access token freshness management."""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

import httpx

from .credentials import ClientIdentity, CredentialState
from .exceptions import AuthExchangeError, NetworkError
from .network_error_handler import extract_error_detail, parse_body
from .transport import HttpTransport

logger = logging.getLogger(__name__)

TOKEN_PATH = "/auth/oauth2/token"

GRANT_AUTHORIZATION_CODE = "authorization_code"
GRANT_REFRESH = "refresh_grant"
GRANT_CLIENT_CREDENTIALS = "client_credentials"

EXPIRY_UNITS = {"seconds": 1.0, "milliseconds": 0.001}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenExchanger:
    """Obtains and refreshes access tokens for a single client.

    All exchanges run under one ``asyncio.Lock``; callers that were waiting
    on the lock re-check freshness before exchanging, so concurrent requests
    hitting a stale token trigger a single exchange.
    """

    def __init__(
        self,
        identity: ClientIdentity,
        state: CredentialState,
        transport: HttpTransport,
        base_auth_url: str,
        expiry_unit: str = "seconds",
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the token exchanger.

        Args:
            identity: Client identity presented to the token endpoint
            state: Credential state this exchanger owns the writes to
            transport: HTTP transport used for exchange calls
            base_auth_url: Prefix of the auth server
            expiry_unit: Unit of ``expires_in`` ("seconds" or "milliseconds")
            clock: Returns the current time as an aware datetime
        """
        if expiry_unit not in EXPIRY_UNITS:
            raise ValueError(f"Unknown token expiry unit: {expiry_unit}")

        self.identity = identity
        self.state = state
        self.transport = transport
        self.expiry_unit = expiry_unit
        self.token_url = f"{base_auth_url.rstrip('/')}{TOKEN_PATH}"
        self._expiry_factor = EXPIRY_UNITS[expiry_unit]
        self._clock = clock
        self._exchange_lock = asyncio.Lock()

    async def ensure_fresh_token(self) -> None:
        """Make sure the access token is fresh, exchanging a grant if needed.

        Strategy priority: pending authorization code, refresh token, client
        credentials. With none available this is a no-op and the request goes
        out with whatever token (if any) is held.

        Raises:
            AuthExchangeError: If the chosen exchange fails
        """
        if self.state.is_fresh(self._clock()):
            return

        async with self._exchange_lock:
            # Another caller may have exchanged while we waited
            if self.state.is_fresh(self._clock()):
                logger.debug("Token refreshed by concurrent exchange")
                return

            if self.state.authorization_code:
                await self._exchange_authorization_code()
            elif self.state.refresh_token:
                await self._exchange_refresh_token()
            elif self.identity.client_secret:
                await self._exchange_client_credentials()
            else:
                logger.debug("No grant available, proceeding without fresh token")

    async def exchange_client_credentials(self) -> None:
        """Exchange the client secret for tokens.

        Raises:
            AuthExchangeError: If the exchange fails
        """
        async with self._exchange_lock:
            await self._exchange_client_credentials()

    async def exchange_refresh_token(self) -> None:
        """Exchange the held refresh token for new tokens.

        Raises:
            AuthExchangeError: If no refresh token is held or the exchange fails
        """
        async with self._exchange_lock:
            if not self.state.refresh_token:
                raise AuthExchangeError(
                    "No refresh token available", grant_type=GRANT_REFRESH
                )
            await self._exchange_refresh_token()

    async def _exchange_authorization_code(self) -> None:
        await self._request_tokens(
            {
                "grant_type": GRANT_AUTHORIZATION_CODE,
                "code": self.state.authorization_code,
            }
        )
        self.state.consume_authorization_code()

    async def _exchange_refresh_token(self) -> None:
        await self._request_tokens(
            {"grant_type": GRANT_REFRESH, "refresh_token": self.state.refresh_token}
        )

    async def _exchange_client_credentials(self) -> None:
        await self._request_tokens({"grant_type": GRANT_CLIENT_CREDENTIALS})

    async def _request_tokens(self, data: Dict[str, Any]) -> None:
        """POST to the token endpoint and record the result.

        Must be called with the exchange lock held.
        """
        grant_type = data["grant_type"]
        logger.debug(f"Exchanging {grant_type} grant at {self.token_url}")

        auth: Optional[httpx.BasicAuth] = None
        if self.identity.client_secret:
            auth = httpx.BasicAuth(self.identity.client_id, self.identity.client_secret)

        try:
            response = await self.transport.request(
                "POST", self.token_url, json=data, auth=auth
            )
        except NetworkError as e:
            raise AuthExchangeError(
                f"Token endpoint unreachable: {e}", grant_type=grant_type
            ) from e

        body = parse_body(response)
        if not response.is_success:
            raise AuthExchangeError(
                f"Token exchange failed: {extract_error_detail(body, response.status_code)}",
                status_code=response.status_code,
                grant_type=grant_type,
            )

        access_token = body.get("access_token") if isinstance(body, dict) else None
        if not access_token or not isinstance(access_token, str):
            raise AuthExchangeError(
                "No valid access token in response",
                status_code=response.status_code,
                grant_type=grant_type,
            )

        expires_at = None
        expires_in = body.get("expires_in")
        if expires_in is None:
            logger.warning("Token response has no expires_in; token treated as stale")
        else:
            try:
                lifetime = timedelta(seconds=float(expires_in) * self._expiry_factor)
            except (TypeError, ValueError) as e:
                raise AuthExchangeError(
                    f"Invalid expires_in in token response: {expires_in!r}",
                    status_code=response.status_code,
                    grant_type=grant_type,
                ) from e
            expires_at = self._clock() + lifetime

        self.state.store_tokens(
            access_token,
            expires_at=expires_at,
            refresh_token=body.get("refresh_token"),
        )
        logger.info(f"Obtained access token via {grant_type} grant")
