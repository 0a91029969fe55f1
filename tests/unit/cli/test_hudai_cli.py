"""Tests for the hudai command line interface."""

import click
import httpx
import pytest
from click.testing import CliRunner

from hudai.cli import cli, parse_params


@pytest.fixture
def runner(monkeypatch):
    for name in (
        "HUDAI_CLIENT_ID",
        "HUDAI_CLIENT_SECRET",
        "HUDAI_REDIRECT_URI",
        "HUDAI_BASE_API_URL",
        "HUDAI_BASE_AUTH_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


@pytest.fixture
def invoke(runner, fake_server, tmp_path):
    config_path = str(tmp_path / "config.json")

    def _invoke(*args):
        return runner.invoke(
            cli,
            ["--config", config_path, *args],
            obj={"transport": fake_server.transport()},
        )

    return _invoke


class TestAuthorizeUrl:
    def test_prints_url(self, invoke, monkeypatch):
        monkeypatch.setenv("HUDAI_REDIRECT_URI", "https://cb")

        result = invoke("--client-id", "abc", "authorize-url")

        assert result.exit_code == 0
        assert "response_type=code" in result.output
        assert "client_id=abc" in result.output
        assert "redirect_uri=https://cb" in result.output

    def test_missing_redirect_uri(self, invoke):
        result = invoke("--client-id", "abc", "authorize-url")

        assert result.exit_code == 1
        assert "redirect_uri" in result.output

    def test_missing_client_id(self, invoke):
        result = invoke("authorize-url")

        assert result.exit_code == 1
        assert "client_id is required" in result.output


class TestToken:
    def test_client_credentials(self, invoke, fake_server):
        result = invoke("--client-id", "abc", "--client-secret", "s3cret", "token")

        assert result.exit_code == 0
        assert "token-1" in result.output
        assert fake_server.grant_types == ["client_credentials"]

    def test_without_secret(self, invoke, fake_server):
        result = invoke("--client-id", "abc", "token")

        assert result.exit_code == 1
        assert "No grant available" in result.output
        assert fake_server.requests == []

    def test_rejected_exchange(self, invoke, fake_server):
        fake_server.token_status = 401

        result = invoke("--client-id", "abc", "--client-secret", "bad", "token")

        assert result.exit_code == 1
        assert "invalid_grant" in result.output


class TestResourceCommands:
    def test_list_passes_params(self, invoke, fake_server, monkeypatch):
        monkeypatch.setenv("HUDAI_CLIENT_ID", "abc")
        fake_server.add_json(
            "GET", "/companies", {"count": 1, "rows": [{"id": "1", "name": "Acme"}]}
        )

        result = invoke("list", "companies", "-p", "limit=5", "-p", "name=Acme")

        assert result.exit_code == 0
        assert '"Acme"' in result.output
        params = fake_server.api_requests[0].url.params
        assert params["limit"] == "5"
        assert params["name"] == "Acme"

    def test_get(self, invoke, fake_server):
        fake_server.add_json("GET", "/key-terms/3", {"id": "3", "term": "ai"})

        result = invoke("--client-id", "abc", "get", "key-terms", "3")

        assert result.exit_code == 0
        assert '"term": "ai"' in result.output

    def test_get_missing_entity(self, invoke):
        result = invoke("--client-id", "abc", "get", "users", "404")

        assert result.exit_code == 1
        assert "Not Found" in result.output

    def test_unexpected_response_shape(self, invoke, fake_server):
        fake_server.add_json("GET", "/users/1", {"id": "1"})

        result = invoke("--client-id", "abc", "get", "users", "1")

        assert result.exit_code == 1
        assert "Unexpected response" in result.output

    def test_delete(self, invoke, fake_server):
        fake_server.add_route("DELETE", "/people/tweets/1", httpx.Response(204))

        result = invoke("--client-id", "abc", "delete", "tweets", "1")

        assert result.exit_code == 0
        assert "Deleted tweets 1" in result.output
        assert fake_server.api_requests[0].url.path == "/people/tweets/1"

    def test_unknown_resource(self, invoke):
        result = invoke("--client-id", "abc", "list", "widgets")

        assert result.exit_code == 2


class TestParseParams:
    def test_repeated_keys_become_lists(self):
        assert parse_params(("tag=a", "tag=b", "tag=c", "limit=1")) == {
            "tag": ["a", "b", "c"],
            "limit": "1",
        }

    def test_rejects_pairs_without_equals(self):
        with pytest.raises(click.BadParameter, match="key=value"):
            parse_params(("limit",))
