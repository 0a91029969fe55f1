"""
Shared pytest fixtures for HUD.ai client tests.

Provides an in-process fake of the HUD.ai auth and API servers built on
``httpx.MockTransport``, so tests exercise the real request pipeline without
touching the network.
"""

import asyncio
import json
from typing import Any, Callable, Dict, List, Tuple, Union

import httpx
import pytest

from hudai.client import HudAiClient

TOKEN_PATH = "/auth/oauth2/token"

Route = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class FakeHudAiServer:
    """Records every request and answers from a route table.

    The token endpoint issues ``token-1``, ``token-2``... on each exchange.
    Routes are keyed by ``(method, path)``; unknown routes answer 404.
    """

    def __init__(self, expires_in: Any = 3600, token_delay: float = 0.0):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.expires_in = expires_in
        self.token_delay = token_delay
        self.issue_refresh_token = True
        self.token_status = 200
        self._issued = 0

    def add_route(self, method: str, path: str, response: Route) -> None:
        self.routes[(method.upper(), path)] = response

    def add_json(self, method: str, path: str, body: Any, status_code: int = 200) -> None:
        self.add_route(method, path, httpx.Response(status_code, json=body))

    @property
    def token_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == TOKEN_PATH]

    @property
    def api_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path != TOKEN_PATH]

    @property
    def grant_types(self) -> List[str]:
        return [json.loads(r.content)["grant_type"] for r in self.token_requests]

    def _token_response(self, request: httpx.Request) -> httpx.Response:
        if self.token_status != 200:
            return httpx.Response(self.token_status, json={"message": "invalid_grant"})
        self._issued += 1
        body: Dict[str, Any] = {"access_token": f"token-{self._issued}"}
        if self.issue_refresh_token:
            body["refresh_token"] = f"refresh-{self._issued}"
        if self.expires_in is not None:
            body["expires_in"] = self.expires_in
        return httpx.Response(200, json=body)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path == TOKEN_PATH:
            if self.token_delay:
                await asyncio.sleep(self.token_delay)
            return self._token_response(request)

        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if callable(route):
            return route(request)
        return route

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_server() -> FakeHudAiServer:
    return FakeHudAiServer()


@pytest.fixture
def make_client(fake_server: FakeHudAiServer) -> Callable[..., HudAiClient]:
    """Factory for clients wired to the fake server."""

    def _make(**config: Any) -> HudAiClient:
        config.setdefault("client_id", "abc")
        return HudAiClient.create(config, transport=fake_server.transport())

    return _make
