"""Rich terminal output for beacon previews."""
from __future__ import annotations

from urllib.parse import urlsplit

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from rztracker.encoding import parse_query_string

console = Console(force_terminal=True)


def render_beacon(url: str) -> None:
    """Show the collector URL and its decoded parameters."""
    parts = urlsplit(url)
    endpoint = f"{parts.scheme}://{parts.netloc}{parts.path}"
    console.print(Panel(endpoint, title="rztracker beacon", style="bold blue"))

    table = Table(show_header=True, header_style="bold")
    table.add_column("Parameter")
    table.add_column("Value", overflow="fold")
    for key, value in parse_query_string(parts.query).items():
        table.add_row(key, value)
    console.print(table)
    console.print()


def render_not_sent() -> None:
    console.print("  [dim]No beacon sent (invalid input or do-not-track).[/dim]")
