"""Command-Line Interface for aletheia.

Provides commands to search the Guardian content API and to fetch single
items by path.
"""

import asyncio
import logging
import os
from enum import Enum
from typing import TypeVar

import typer
from rich.console import Console

from aletheia.cli.display import display_item, display_search_results
from aletheia.client import GuardianContentClient
from aletheia.config import Config
from aletheia.enums import Block, Endpoint, Field, OrderBy, Tag
from aletheia.errors import AletheiaError
from aletheia.models import SearchResponse
from aletheia.util import setup_logging

E = TypeVar("E", bound=Enum)

app = typer.Typer(
    name="aletheia",
    help="Search the Guardian content API from the command line.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log requests at debug level."
    ),
):
    """Search the Guardian content API from the command line."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


def _get_console(use_stderr: bool = False) -> Console:
    """Create a rich console writing to stdout or stderr."""
    return Console(stderr=use_stderr)


def _resolve_api_key(api_key: str | None) -> str:
    """Return the API key from the option or the environment.

    Raises:
        typer.Exit: If no key is available.
    """
    effective_key = api_key or os.getenv(Config.API_KEY_ENV_VAR)
    if not effective_key:
        _get_console(use_stderr=True).print(
            "[bold red]API key required.[/bold red]\n"
            f"Set {Config.API_KEY_ENV_VAR} or use --api-key option."
        )
        raise typer.Exit(code=1)
    return effective_key


def _parse_tokens(value: str | None, enum_type: type[E]) -> list[E]:
    """Parse a comma-separated list of wire tokens into enum members.

    Raises:
        typer.BadParameter: If a token is not a member of ``enum_type``.
    """
    if not value:
        return []
    members = []
    for token in value.split(","):
        token = token.strip()
        try:
            members.append(enum_type(token))
        except ValueError:
            choices = ", ".join(member.value for member in enum_type)
            raise typer.BadParameter(f"'{token}' is not one of: {choices}")
    return members


def _parse_blocks(value: str | None) -> list[Block]:
    """Parse ``main``, ``body``, ``all`` and ``body:...`` selectors."""
    if not value:
        return []
    simple = {"main": Block.MAIN, "body": Block.BODY, "all": Block.ALL}
    blocks = []
    for token in value.split(","):
        token = token.strip()
        if token in simple:
            blocks.append(simple[token])
        elif token == "body:key-events":
            blocks.append(Block.BODY_KEY_EVENTS)
        elif token == "body:latest":
            blocks.append(Block.BODY_LATEST)
        elif token.startswith("body:latest:"):
            blocks.append(Block.body_latest_with(_parse_int(token)))
        elif token.startswith("body:oldest:"):
            blocks.append(Block.body_oldest_with(_parse_int(token)))
        elif token.startswith("body:published-since:"):
            blocks.append(Block.body_published_since(_parse_int(token)))
        elif token.startswith("body:around:"):
            parts = token.split(":")
            if len(parts) == 3:
                blocks.append(Block.body_around_block_id(parts[2]))
            elif len(parts) == 4:
                limit = _parse_int(token)
                blocks.append(Block.body_around_block_id_with(parts[2], limit))
            else:
                raise typer.BadParameter(f"Unsupported block selector '{token}'")
        elif token.startswith("body:") and ":" not in token[len("body:") :]:
            blocks.append(Block.body_block_id(token[len("body:") :]))
        else:
            raise typer.BadParameter(f"Unsupported block selector '{token}'")
    return blocks


def _parse_int(token: str) -> int:
    tail = token.rsplit(":", 1)[-1]
    try:
        return int(tail)
    except ValueError:
        raise typer.BadParameter(f"Expected a number at the end of '{token}'")


async def _send_async(client: GuardianContentClient) -> SearchResponse:
    """Send the request built on ``client``."""
    return await client.send()


def _run(client: GuardianContentClient) -> SearchResponse:
    try:
        return asyncio.run(_send_async(client))
    except AletheiaError as e:
        _get_console(use_stderr=True).print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(code=1)


@app.command("search")
def search_command(
    query_string: str = typer.Argument(..., help="The search query string."),
    endpoint: str = typer.Option(
        Endpoint.CONTENT.value,
        "--endpoint",
        "-e",
        help="Listing to search: content, tags, sections or editions.",
    ),
    page: int | None = typer.Option(None, "--page", help="Page number."),
    page_size: int | None = typer.Option(
        None, "--page-size", "-n", help="Results per page (1-200)."
    ),
    order_by: str | None = typer.Option(
        None, "--order-by", help="newest, oldest or relevance."
    ),
    show_fields: str | None = typer.Option(
        None, "--show-fields", help="Comma-separated fields, e.g. headline,byline."
    ),
    show_tags: str | None = typer.Option(
        None, "--show-tags", help="Comma-separated tag types, e.g. keyword,tone."
    ),
    section: str | None = typer.Option(
        None, "--section", help="Only return content in this section."
    ),
    api_key: str | None = typer.Option(
        None, "--api-key", help=f"API key. Overrides {Config.API_KEY_ENV_VAR}."
    ),
):
    """Search content, tags, sections or editions."""
    selected = _parse_tokens(endpoint, Endpoint)[0]
    if selected is Endpoint.SINGLE_ITEM:
        raise typer.BadParameter("Use the 'item' command for single items.")

    client = GuardianContentClient(_resolve_api_key(api_key))
    client.endpoint(selected).search(query_string)
    if page is not None:
        client.page(page)
    if page_size is not None:
        client.page_size(page_size)
    if order_by:
        client.order_by(_parse_tokens(order_by, OrderBy)[0])
    if show_fields:
        client.show_fields(_parse_tokens(show_fields, Field))
    if show_tags:
        client.show_tags(_parse_tokens(show_tags, Tag))
    if section:
        client.section(section)

    display_search_results(_run(client))


@app.command("item")
def item_command(
    item_id: str = typer.Argument(
        ..., help="Item path, e.g. world/2022/jan/01/some-article."
    ),
    show_fields: str | None = typer.Option(
        None, "--show-fields", help="Comma-separated fields, e.g. headline,byline."
    ),
    show_tags: str | None = typer.Option(
        None, "--show-tags", help="Comma-separated tag types, e.g. keyword,tone."
    ),
    show_blocks: str | None = typer.Option(
        None,
        "--show-blocks",
        help="Comma-separated selectors, e.g. main,body:latest:5.",
    ),
    api_key: str | None = typer.Option(
        None, "--api-key", help=f"API key. Overrides {Config.API_KEY_ENV_VAR}."
    ),
):
    """Fetch a single content item, tag or section by its path."""
    client = GuardianContentClient(_resolve_api_key(api_key))
    client.endpoint(Endpoint.SINGLE_ITEM).search(item_id)
    if show_fields:
        client.show_fields(_parse_tokens(show_fields, Field))
    if show_tags:
        client.show_tags(_parse_tokens(show_tags, Tag))
    if show_blocks:
        client.show_blocks(_parse_blocks(show_blocks))

    display_item(_run(client))


if __name__ == "__main__":
    app()
