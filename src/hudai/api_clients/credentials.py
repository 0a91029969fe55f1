"""Client identity and the mutable credential state it authenticates with."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class ClientIdentity:
    """Static OAuth client identity, fixed for the life of a client."""

    client_id: str
    client_secret: Optional[str] = None
    redirect_uri: Optional[str] = None


class CredentialState:
    """Tokens currently held by a client.

    Token fields are only written through :meth:`store_tokens`, which updates
    access token, refresh token and expiry in one step so that no reader ever
    observes a half-applied exchange. The pending authorization code is
    written by :meth:`set_authorization_code` and cleared by
    :meth:`consume_authorization_code`.
    """

    def __init__(self):
        self._access_token: Optional[str] = None
        self._refresh_token: Optional[str] = None
        self._authorization_code: Optional[str] = None
        self._token_expires_at: Optional[datetime] = None

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    @property
    def refresh_token(self) -> Optional[str]:
        return self._refresh_token

    @property
    def authorization_code(self) -> Optional[str]:
        return self._authorization_code

    @property
    def token_expires_at(self) -> Optional[datetime]:
        return self._token_expires_at

    def is_fresh(self, now: datetime) -> bool:
        """True when an expiry is known and lies strictly after ``now``."""
        return self._token_expires_at is not None and self._token_expires_at > now

    def store_tokens(
        self,
        access_token: Optional[str],
        expires_at: Optional[datetime] = None,
        refresh_token: Optional[str] = None,
    ) -> None:
        """Record the outcome of a token exchange.

        A ``refresh_token`` of None keeps the current refresh token. Clearing
        the access token always clears its expiry. A naive
        ``expires_at`` is taken to be UTC.
        """
        if expires_at is not None and expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        if refresh_token:
            self._refresh_token = refresh_token
        self._access_token = access_token
        self._token_expires_at = expires_at if access_token else None

    def set_authorization_code(self, authorization_code: Optional[str]) -> None:
        self._authorization_code = authorization_code or None

    def consume_authorization_code(self) -> None:
        """Drop the pending authorization code once it has been exchanged."""
        self._authorization_code = None
