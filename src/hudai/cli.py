"""Command line interface for the HUD.ai client."""

import asyncio
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, Iterator, Optional, Tuple, TypeVar

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .api_clients.exceptions import HudAiError, NetworkError
from .client import HudAiClient
from .config import ConfigManager

logger = logging.getLogger(__name__)
console = Console()

T = TypeVar("T")

# CLI name -> HudAiClient attribute
RESOURCES = {
    "articles": "article",
    "article-highlights": "article_highlight",
    "companies": "company",
    "domains": "domain",
    "key-terms": "key_term",
    "text-corpora": "text_corpus",
    "tweets": "tweet",
    "users": "user",
}


@contextmanager
def reported_errors() -> Iterator[None]:
    """Print client errors in red and exit with status 1."""
    try:
        yield
    except NetworkError as e:
        console.print(f"❌ {e}", style="red", markup=False)
        if e.user_guidance:
            console.print(e.user_guidance)
        sys.exit(1)
    except HudAiError as e:
        console.print(f"❌ {e}", style="red", markup=False)
        sys.exit(1)


def build_client(ctx: click.Context) -> HudAiClient:
    manager: ConfigManager = ctx.obj["config_manager"]
    config = manager.load(ctx.obj["overrides"])
    # An httpx transport may be injected through the context object
    return HudAiClient.create(config, transport=ctx.obj.get("transport"))


def run_with_client(
    ctx: click.Context, operation: Callable[[HudAiClient], Awaitable[T]]
) -> T:
    """Run ``operation`` against a freshly built client and close it afterwards."""

    async def _run() -> T:
        async with build_client(ctx) as client:
            return await operation(client)

    with reported_errors():
        return asyncio.run(_run())


def parse_params(pairs: Tuple[str, ...]) -> Dict[str, Any]:
    """Turn repeated ``key=value`` options into a query dict."""
    params: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got '{pair}'")
        if key in params:
            existing = params[key]
            if isinstance(existing, list):
                existing.append(value)
            else:
                params[key] = [existing, value]
        else:
            params[key] = value
    return params


def print_json(data: Any) -> None:
    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json", by_alias=True, exclude_none=True)
    console.print_json(data=data)


@click.group()
@click.option("--config", "-c", type=click.Path(dir_okay=False), help="Config file path")
@click.option("--client-id", help="OAuth client id")
@click.option("--client-secret", help="OAuth client secret")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(version=__version__, prog_name="hudai")
@click.pass_context
def cli(
    ctx,
    config: Optional[str],
    client_id: Optional[str],
    client_secret: Optional[str],
    verbose: bool,
):
    """Command line access to the HUD.ai API.

    \b
    CONFIGURATION:
      Config file: ~/.hudai/config.json
      Environment: HUDAI_CLIENT_ID, HUDAI_CLIENT_SECRET, HUDAI_REDIRECT_URI,
                   HUDAI_BASE_API_URL, HUDAI_BASE_AUTH_URL

    \b
    EXAMPLES:
      hudai authorize-url
      hudai list articles -p limit=5 -p keyTerm=ai
      hudai get companies 42
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config_manager"] = ConfigManager(Path(config) if config else None)
    ctx.obj["overrides"] = {"client_id": client_id, "client_secret": client_secret}


@cli.command("authorize-url")
@click.option("--response-type", default="code", show_default=True)
@click.pass_context
def authorize_url(ctx, response_type: str):
    """Print the URL a user visits to authorize this client."""
    with reported_errors():
        client = build_client(ctx)
        console.print(
            client.get_authorize_uri(response_type), markup=False, soft_wrap=True
        )


@cli.command()
@click.pass_context
def token(ctx):
    """Obtain an access token with the configured credentials."""

    async def _token(client: HudAiClient):
        await client.refresh_tokens()
        return client.get_access_token(), client.token_expires_at

    access_token, expires_at = run_with_client(ctx, _token)
    if not access_token:
        console.print("❌ No grant available: configure a client secret", style="red")
        sys.exit(1)

    table = Table(show_header=False)
    table.add_row("access_token", access_token)
    table.add_row("expires_at", expires_at.isoformat() if expires_at else "-")
    console.print(table)


@cli.command("list")
@click.argument("resource", type=click.Choice(sorted(RESOURCES)))
@click.option("--param", "-p", "params", multiple=True, help="Query parameter key=value")
@click.pass_context
def list_command(ctx, resource: str, params: Tuple[str, ...]):
    """List entities of RESOURCE."""
    query = parse_params(params)
    page = run_with_client(
        ctx, lambda client: getattr(client, RESOURCES[resource]).list(query)
    )
    print_json(page)


@cli.command("get")
@click.argument("resource", type=click.Choice(sorted(RESOURCES)))
@click.argument("entity_id")
@click.pass_context
def get_command(ctx, resource: str, entity_id: str):
    """Show one entity of RESOURCE."""
    entity = run_with_client(
        ctx, lambda client: getattr(client, RESOURCES[resource]).get(entity_id)
    )
    print_json(entity)


@cli.command("delete")
@click.argument("resource", type=click.Choice(sorted(RESOURCES)))
@click.argument("entity_id")
@click.pass_context
def delete_command(ctx, resource: str, entity_id: str):
    """Delete one entity of RESOURCE."""
    run_with_client(
        ctx, lambda client: getattr(client, RESOURCES[resource]).destroy(entity_id)
    )
    console.print(f"✅ Deleted {resource} {entity_id}", style="green")


def main():
    """Main entry point."""
    try:
        cli(obj={})
    except KeyboardInterrupt:
        console.print("\n❌ Interrupted by user", style="red")
        sys.exit(1)


if __name__ == "__main__":
    main()
