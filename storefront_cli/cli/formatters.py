"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from storefront_cli.core.server import ContentServer
from storefront_cli.models.config import get_kind_info
from storefront_cli.models.receipt import Receipt
from storefront_cli.utils.formatting import (
    format_duration,
    format_minutes,
    format_price,
    format_seconds,
    format_size_mb,
    join_titles,
)


def receipt_lines(receipt: Receipt) -> list[str]:
    """Renders a receipt as the four plain-text lines of a printed slip."""
    seconds = format_seconds(receipt.estimated_seconds)
    minutes = format_minutes(receipt.estimated_seconds)
    return [
        f"Items: {join_titles(receipt.item_titles, '-')}",
        f"Missing: {join_titles(receipt.missing, 'None')}",
        f"Estimated download: {seconds} s ({minutes} min)",
        f"Total: {format_price(receipt.total_price)}",
    ]


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "DuplicateTitleError": [
            "• Every title in a catalog must be unique.",
            "• Rename or remove the repeated item before building the server.",
        ],
        "InvalidItemError": [
            "• Titles must be non-empty.",
            "• Sizes and prices cannot be negative.",
        ],
        "UnknownServerKindError": [
            "• Use --kind music or --kind video.",
            "• Run `storefront-cli catalog` to list the available catalogs.",
        ],
        "ConfigurationError": [
            "• Check the values in your configuration file.",
            "• Run `storefront-cli init --force` to write a fresh default file.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(Text("\n".join(suggestions)))

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_receipt(receipt: Receipt, title: str = "Receipt"):
    """Displays a receipt in a panel, one row per receipt line."""
    console = Console()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column()

    for line in receipt_lines(receipt):
        label, _, value = line.partition(": ")
        value = escape(value)
        if label == "Missing" and receipt.missing:
            value = f"[yellow]{value}[/yellow]"
        elif label == "Total":
            value = f"[bold green]{value}[/bold green]"
        table.add_row(f"{label}:", value)

    console.print(
        Panel(
            table,
            title=f"[bold]{title}[/bold]",
            subtitle=f"[dim]{format_duration(receipt.estimated_seconds)}[/dim]",
            border_style="green" if not receipt.missing else "yellow",
            box=box.ROUNDED,
            expand=False,
            padding=(1, 2),
        )
    )


def print_catalog_table(kind: str, server: ContentServer):
    """Displays the items of a server's catalog."""
    console = Console()
    info = get_kind_info(kind)
    table = Table(
        title=f"{info['name']} Catalog ({server.speed_mbps:g} MB/s)",
        box=box.ROUNDED,
    )
    table.add_column(info["item"], style=info["color"])
    table.add_column("Size", justify="right")
    table.add_column("Price", justify="right", style="green")
    for item in server.catalog:
        table.add_row(
            escape(item.title), format_size_mb(item.size_mb), format_price(item.price)
        )
    console.print(table)


def print_config(config_path: Path, config_data: dict[str, Any]):
    """Displays the effective configuration."""
    console = Console()
    content = ""
    for key, value in config_data.items():
        content += f"{key} = {value}\n"

    console.print(
        Panel(
            content.strip(),
            title=f"Configuration ([dim]{config_path}[/dim])",
            border_style="cyan",
        )
    )
