"""Unit tests for TokenExchanger grant selection and token bookkeeping."""

import asyncio
import base64
import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from hudai.api_clients.credentials import ClientIdentity, CredentialState
from hudai.api_clients.exceptions import AuthExchangeError
from hudai.api_clients.token_exchanger import TokenExchanger
from hudai.api_clients.transport import HttpTransport


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 1, tzinfo=timezone.utc))


@pytest.fixture
def make_exchanger(fake_server, clock):
    def _make(client_secret=None, expiry_unit="seconds", transport=None):
        return TokenExchanger(
            identity=ClientIdentity(client_id="abc", client_secret=client_secret),
            state=CredentialState(),
            transport=HttpTransport(transport=transport or fake_server.transport()),
            base_auth_url="https://auth.hud.ai",
            expiry_unit=expiry_unit,
            clock=clock,
        )

    return _make


class TestEnsureFreshToken:
    @pytest.mark.asyncio
    async def test_client_credentials_exchange(self, make_exchanger, fake_server, clock):
        exchanger = make_exchanger(client_secret="s3cret")

        await exchanger.ensure_fresh_token()

        request = fake_server.token_requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://auth.hud.ai/auth/oauth2/token"
        assert json.loads(request.content) == {"grant_type": "client_credentials"}
        expected_auth = base64.b64encode(b"abc:s3cret").decode()
        assert request.headers["Authorization"] == f"Basic {expected_auth}"

        assert exchanger.state.access_token == "token-1"
        assert exchanger.state.refresh_token == "refresh-1"
        assert exchanger.state.token_expires_at == clock.now + timedelta(seconds=3600)

    @pytest.mark.asyncio
    async def test_fresh_token_makes_no_network_calls(
        self, make_exchanger, fake_server, clock
    ):
        exchanger = make_exchanger(client_secret="s3cret")
        await exchanger.ensure_fresh_token()

        for _ in range(5):
            clock.advance(seconds=600)
            await exchanger.ensure_fresh_token()

        assert len(fake_server.token_requests) == 1

        clock.advance(seconds=600)
        await exchanger.ensure_fresh_token()

        assert len(fake_server.token_requests) == 2

    @pytest.mark.asyncio
    async def test_authorization_code_wins_over_refresh_token(
        self, make_exchanger, fake_server
    ):
        exchanger = make_exchanger(client_secret="s3cret")
        exchanger.state.store_tokens("old", None, refresh_token="old-refresh")
        exchanger.state.set_authorization_code("auth-code")

        await exchanger.ensure_fresh_token()

        assert json.loads(fake_server.token_requests[0].content) == {
            "grant_type": "authorization_code",
            "code": "auth-code",
        }
        assert exchanger.state.authorization_code is None
        assert exchanger.state.access_token == "token-1"
        assert exchanger.state.refresh_token == "refresh-1"

    @pytest.mark.asyncio
    async def test_refresh_token_wins_over_client_secret(
        self, make_exchanger, fake_server
    ):
        exchanger = make_exchanger(client_secret="s3cret")
        exchanger.state.store_tokens("old", None, refresh_token="old-refresh")

        await exchanger.ensure_fresh_token()

        assert json.loads(fake_server.token_requests[0].content) == {
            "grant_type": "refresh_grant",
            "refresh_token": "old-refresh",
        }

    @pytest.mark.asyncio
    async def test_refresh_token_kept_when_response_omits_it(
        self, make_exchanger, fake_server
    ):
        exchanger = make_exchanger()
        exchanger.state.store_tokens("old", None, refresh_token="old-refresh")
        fake_server.issue_refresh_token = False

        await exchanger.ensure_fresh_token()

        assert exchanger.state.access_token == "token-1"
        assert exchanger.state.refresh_token == "old-refresh"

    @pytest.mark.asyncio
    async def test_no_grant_available_is_a_silent_noop(
        self, make_exchanger, fake_server
    ):
        exchanger = make_exchanger()

        await exchanger.ensure_fresh_token()

        assert fake_server.requests == []
        assert exchanger.state.access_token is None

    @pytest.mark.asyncio
    async def test_milliseconds_expiry_unit(self, make_exchanger, fake_server, clock):
        fake_server.expires_in = 3600
        exchanger = make_exchanger(client_secret="s3cret", expiry_unit="milliseconds")

        await exchanger.ensure_fresh_token()

        assert exchanger.state.token_expires_at == clock.now + timedelta(seconds=3.6)

    @pytest.mark.asyncio
    async def test_missing_expires_in_leaves_token_stale(
        self, make_exchanger, fake_server
    ):
        fake_server.expires_in = None
        exchanger = make_exchanger(client_secret="s3cret")

        await exchanger.ensure_fresh_token()
        await exchanger.ensure_fresh_token()

        assert exchanger.state.token_expires_at is None
        assert len(fake_server.token_requests) == 2

    @pytest.mark.asyncio
    async def test_concurrent_callers_share_one_exchange(self, make_exchanger, fake_server):
        fake_server.token_delay = 0.05
        exchanger = make_exchanger(client_secret="s3cret")

        await asyncio.gather(*(exchanger.ensure_fresh_token() for _ in range(5)))

        assert len(fake_server.token_requests) == 1
        assert exchanger.state.access_token == "token-1"


class TestExchangeFailures:
    @pytest.mark.asyncio
    async def test_rejected_exchange_raises_and_keeps_code(
        self, make_exchanger, fake_server
    ):
        fake_server.token_status = 400
        exchanger = make_exchanger()
        exchanger.state.set_authorization_code("auth-code")

        with pytest.raises(AuthExchangeError) as exc_info:
            await exchanger.ensure_fresh_token()

        assert exc_info.value.status_code == 400
        assert exc_info.value.grant_type == "authorization_code"
        assert "invalid_grant" in str(exc_info.value)
        assert exchanger.state.authorization_code == "auth-code"
        assert exchanger.state.access_token is None

    @pytest.mark.asyncio
    async def test_failed_exchange_is_not_retried(self, make_exchanger, fake_server):
        fake_server.token_status = 401
        exchanger = make_exchanger(client_secret="wrong")

        with pytest.raises(AuthExchangeError):
            await exchanger.ensure_fresh_token()

        assert len(fake_server.token_requests) == 1

    @pytest.mark.asyncio
    async def test_unreachable_token_endpoint(self, make_exchanger):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        exchanger = make_exchanger(
            client_secret="s3cret", transport=httpx.MockTransport(refuse)
        )

        with pytest.raises(AuthExchangeError) as exc_info:
            await exchanger.ensure_fresh_token()

        assert exc_info.value.status_code is None
        assert "unreachable" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_response_without_access_token(self, make_exchanger):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json={"expires_in": 60})
        )
        exchanger = make_exchanger(client_secret="s3cret", transport=transport)

        with pytest.raises(AuthExchangeError, match="No valid access token"):
            await exchanger.ensure_fresh_token()

    @pytest.mark.asyncio
    async def test_explicit_refresh_without_refresh_token(
        self, make_exchanger, fake_server
    ):
        exchanger = make_exchanger()

        with pytest.raises(AuthExchangeError, match="No refresh token"):
            await exchanger.exchange_refresh_token()

        assert fake_server.requests == []


def test_unknown_expiry_unit_rejected(fake_server):
    with pytest.raises(ValueError):
        TokenExchanger(
            identity=ClientIdentity(client_id="abc"),
            state=CredentialState(),
            transport=HttpTransport(transport=fake_server.transport()),
            base_auth_url="https://auth.hud.ai",
            expiry_unit="minutes",
        )
