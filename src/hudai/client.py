"""HudAiClient: the public entry point of the SDK."""

import logging
from datetime import datetime
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote, urlencode

import httpx

from .api_clients.credentials import ClientIdentity, CredentialState
from .api_clients.exceptions import ConfigurationError
from .api_clients.request_dispatcher import RequestDispatcher
from .api_clients.token_exchanger import TokenExchanger
from .api_clients.transport import HttpTransport
from .config import HudAiClientConfig, build_config
from .resources import (
    ArticleHighlightResource,
    ArticleResource,
    CompanyResource,
    DomainResource,
    KeyTermResource,
    TextCorpusResource,
    TweetResource,
    UserResource,
)

logger = logging.getLogger(__name__)


class HudAiClient:
    """Client for the HUD.ai API.

    Owns the credential state for one OAuth client and exposes one attribute
    per resource family. Every resource call makes sure the access token is
    fresh first, exchanging a grant when one is available::

        async with HudAiClient.create({"client_id": "...", "client_secret": "..."}) as client:
            page = await client.article.list({"limit": 10})
    """

    def __init__(
        self,
        config: HudAiClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            config: Validated client configuration
            transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests
        """
        self.config = config
        self.base_api_url = config.base_api_url
        self.base_auth_url = config.base_auth_url

        self._identity = ClientIdentity(
            client_id=config.client_id,
            client_secret=config.client_secret,
            redirect_uri=config.redirect_uri,
        )
        self._credentials = CredentialState()

        options = config.request
        self._transport = HttpTransport(
            timeout=options.timeout,
            connect_timeout=options.connect_timeout,
            headers=options.headers,
            verify=options.verify,
            follow_redirects=options.follow_redirects,
            transport=transport,
        )
        self._exchanger = TokenExchanger(
            identity=self._identity,
            state=self._credentials,
            transport=self._transport,
            base_auth_url=self.base_auth_url,
            expiry_unit=config.token_expiry_unit,
        )
        self._dispatcher = RequestDispatcher(
            base_api_url=self.base_api_url,
            state=self._credentials,
            exchanger=self._exchanger,
            transport=self._transport,
        )

        self.article = ArticleResource(self._dispatcher)
        self.article_highlight = ArticleHighlightResource(self._dispatcher)
        self.company = CompanyResource(self._dispatcher)
        self.domain = DomainResource(self._dispatcher)
        self.key_term = KeyTermResource(self._dispatcher)
        self.text_corpus = TextCorpusResource(self._dispatcher)
        self.tweet = TweetResource(self._dispatcher)
        self.user = UserResource(self._dispatcher)

    @classmethod
    def create(
        cls,
        config: Union[HudAiClientConfig, Mapping[str, Any]],
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "HudAiClient":
        """Build a client from a config object or a plain mapping.

        Mappings may use snake_case or the camelCase keys of the JavaScript SDK.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        if not isinstance(config, HudAiClientConfig):
            config = build_config(config)
        return cls(config, transport=transport)

    @property
    def refresh_token(self) -> Optional[str]:
        return self._credentials.refresh_token

    @property
    def token_expires_at(self) -> Optional[datetime]:
        return self._credentials.token_expires_at

    def get_authorize_uri(self, response_type: str = "code") -> str:
        """Build the URL a user visits to grant this client access.

        Defaults to the more secure ``code`` response type.

        Raises:
            ConfigurationError: If client_id or redirect_uri is not configured
        """
        if not self._identity.client_id:
            raise ConfigurationError(
                "cannot generate authorization URL without client_id"
            )
        if not self._identity.redirect_uri:
            raise ConfigurationError(
                "cannot generate authorization URL without redirect_uri"
            )

        params = urlencode(
            {
                "response_type": response_type,
                "client_id": self._identity.client_id,
                "redirect_uri": self._identity.redirect_uri,
            },
            quote_via=quote,
            safe=":/",
        )
        return f"{self.base_auth_url}/authorize?{params}"

    def get_access_token(self) -> Optional[str]:
        return self._credentials.access_token

    def set_access_token(
        self, access_token: Optional[str], expires_at: Optional[datetime] = None
    ) -> None:
        """Use an access token obtained elsewhere.

        Without ``expires_at`` the token is not considered fresh, so the next
        request still exchanges a grant if one is available.
        """
        self._credentials.store_tokens(access_token, expires_at=expires_at)

    def set_authorization_code(self, authorization_code: str) -> None:
        """Queue an authorization code; it is exchanged on the next request."""
        self._credentials.set_authorization_code(authorization_code)
        logger.debug("Authorization code queued for exchange")

    async def exchange_client_credentials(self) -> None:
        """Obtain tokens with the client_credentials grant.

        Raises:
            AuthExchangeError: If the token endpoint rejects the exchange
        """
        await self._exchanger.exchange_client_credentials()

    async def handle_token_refresh(self) -> None:
        """Obtain new tokens with the held refresh token.

        Raises:
            AuthExchangeError: If the token endpoint rejects the exchange
        """
        await self._exchanger.exchange_refresh_token()

    async def refresh_tokens(self) -> None:
        """Exchange a grant if the access token is not fresh.

        Raises:
            AuthExchangeError: If the exchange fails
        """
        await self._exchanger.ensure_fresh_token()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._transport.close()

    async def __aenter__(self) -> "HudAiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
