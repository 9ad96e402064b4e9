# src/aletheia/cli/display.py

"""Display and formatting utilities for CLI output."""

from datetime import datetime

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from aletheia.models import SearchResponse, SearchResult

console = Console()


def format_date(value: datetime | None) -> str:
    """Format a publication date for a table cell.

    Args:
        value: The date to format, if any.

    Returns:
        ``YYYY-MM-DD HH:MM`` or an empty string.
    """
    if value is None:
        return ""
    return value.strftime("%Y-%m-%d %H:%M")


def _title(item: SearchResult) -> str:
    if item.fields is not None and item.fields.headline:
        return item.fields.headline
    return item.web_title or item.id or ""


def display_search_results(response: SearchResponse) -> None:
    """Displays a page of listing results as a table.

    Args:
        response: The decoded response payload.
    """
    results = response.results or []
    if response.total is not None:
        console.print(
            f"Page {response.current_page or 1} of {response.pages or 1} "
            f"({response.total} results)"
        )

    if not results:
        console.print("[yellow]No results found.[/yellow]")
        return

    table = Table(show_lines=False, border_style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Section", style="green")
    table.add_column("Published", style="dim")
    table.add_column("URL", style="cyan", overflow="fold")

    for item in results:
        table.add_row(
            _title(item),
            item.section_name or item.type or "",
            format_date(item.web_publication_date),
            item.web_url or "",
        )

    console.print(table)


def display_item(response: SearchResponse) -> None:
    """Displays the content returned by the single-item endpoint.

    Tag and section items, which carry a listing of their content, are shown
    as a listing.

    Args:
        response: The decoded response payload.
    """
    item = response.content
    if item is None:
        display_search_results(response)
        return

    console.rule(f"[bold]{_title(item)}[/bold]", style="dim")
    console.print(f"[bold cyan]ID:[/bold cyan] [dim]{item.id}[/dim]")
    if item.section_name:
        console.print(
            f"[bold cyan]Section:[/bold cyan] [green]{item.section_name}[/green]"
        )
    if item.web_publication_date:
        console.print(
            "[bold cyan]Published:[/bold cyan] "
            f"{format_date(item.web_publication_date)}"
        )
    if item.web_url:
        console.print(
            f"[bold cyan]URL:[/bold cyan] [link={item.web_url}]{item.web_url}[/link]"
        )

    if item.fields is not None:
        if item.fields.byline:
            console.print(f"[bold cyan]Byline:[/bold cyan] {item.fields.byline}")
        if item.fields.trail_text:
            console.print(
                Panel(
                    item.fields.trail_text,
                    title="[bold blue]Trail text[/bold blue]",
                    border_style="blue",
                    expand=False,
                    padding=(0, 1),
                )
            )

    if item.tags:
        tags = ", ".join(tag.web_title or tag.id or "" for tag in item.tags)
        console.print(f"[bold cyan]Tags:[/bold cyan] {tags}")

    if item.blocks is not None and item.blocks.body is not None:
        console.print(f"[bold cyan]Body blocks:[/bold cyan] {len(item.blocks.body)}")

    console.rule(style="dim")
