"""
Defines the command-line interface for the application using Typer.
"""

import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from storefront_cli import __version__
from storefront_cli.core.storefront import Storefront
from storefront_cli.exceptions import StorefrontError
from storefront_cli.models.config import SERVER_KINDS, StoreConfig, get_kind_info
from storefront_cli.samples import DEMO_RUNS, build_server, build_servers
from storefront_cli.storage.config_manager import ConfigManager
from storefront_cli.utils.structured_logger import create_structured_logger

from .formatters import print_catalog_table, print_config, print_receipt

console = Console()

logging.basicConfig(
    level="WARNING",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=False,
        )
    ],
)
log = logging.getLogger("storefront_cli")

app = typer.Typer(
    name="storefront-cli",
    help=(
        "Check out songs and movies from a digital storefront. Use 'storefront-cli"
        " <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "storefront-cli"


DEFAULT_CONFIG_FILE = get_config_dir() / "config.ini"


def _load_config(ctx: typer.Context) -> StoreConfig:
    try:
        return ConfigManager(ctx.obj["config_file"]).load_config()
    except StorefrontError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e


def _open_storefront(ctx: typer.Context, server) -> Storefront:
    log_dir = ctx.obj["log_dir"]
    if log_dir is None:
        return Storefront(server)
    # Storefront logs each checkout itself, so events only go to the file
    base_logger, checkout_logger = create_structured_logger(log_dir=log_dir, echo=False)
    ctx.call_on_close(base_logger.close)
    return Storefront(server, event_logger=checkout_logger)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    config_file: Path = typer.Option(  # noqa: B008
        DEFAULT_CONFIG_FILE,
        "--config",
        "-c",
        help="Path to the INI configuration file.",
    ),
    log_dir: Path | None = typer.Option(  # noqa: B008
        None,
        "--log-dir",
        help="Write JSON-lines checkout events to this directory.",
    ),
):
    """Digital Storefront CLI"""
    if version:
        console.print(
            f"[bold]storefront-cli[/bold] version [cyan]{__version__}[/cyan]"
        )
        raise typer.Exit()

    log_level = "WARNING"
    if verbose == 1:
        log_level = "INFO"
    elif verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("storefront_cli").setLevel(log_level)

    ctx.obj = {"config_file": config_file, "log_dir": log_dir}

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def demo(ctx: typer.Context):
    """Run one music checkout and one video checkout on the sample catalogs."""
    config = _load_config(ctx)
    try:
        servers = build_servers(config)
        first_kind, _ = DEMO_RUNS[0]
        store = _open_storefront(ctx, servers[first_kind])
        for run, (kind, titles) in enumerate(DEMO_RUNS, 1):
            if store.active_server is not servers[kind]:
                store.set_active_server(servers[kind])
            receipt = store.checkout(titles)
            print_receipt(receipt, title=f"Run {run} ({get_kind_info(kind)['name']})")
    except StorefrontError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e


@app.command()
def checkout(
    ctx: typer.Context,
    titles: list[str] = typer.Argument(  # noqa: B008
        ..., help="Titles to buy, in the order they should appear on the receipt."
    ),
    kind: str | None = typer.Option(
        None,
        "--kind",
        "-k",
        help="Catalog to buy from: music or video (default from config).",
    ),
    speed: float | None = typer.Option(
        None,
        "--speed",
        "-s",
        min=0.0,
        help="Override the download speed in MB/s.",
    ),
):
    """Buy a list of titles from one catalog."""
    config = _load_config(ctx)
    try:
        kind = (kind or config.default_kind).lower()
        server_speed = speed if speed is not None else config.speed_for(kind)
        server = build_server(kind, server_speed)
        receipt = _open_storefront(ctx, server).checkout(titles)
    except StorefrontError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e
    print_receipt(receipt, title=f"{get_kind_info(kind)['name']} Receipt")
    if receipt.missing:
        log.warning(f"{len(receipt.missing)} title(s) not found in the {kind} catalog.")


@app.command(name="catalog")
def catalog_command(
    ctx: typer.Context,
    kind: str | None = typer.Option(
        None, "--kind", "-k", help="Show only this catalog: music or video."
    ),
):
    """List the sample catalogs with sizes and prices."""
    config = _load_config(ctx)
    kinds = [kind.lower()] if kind else list(SERVER_KINDS)
    try:
        for k in kinds:
            print_catalog_table(k, build_server(k, config.speed_for(k)))
    except StorefrontError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e


@app.command()
def init(
    ctx: typer.Context,
    music_speed: float | None = typer.Option(
        None, "--music-speed", min=0.0, help="Music server speed in MB/s."
    ),
    video_speed: float | None = typer.Option(
        None, "--video-speed", min=0.0, help="Video server speed in MB/s."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing file without asking."
    ),
):
    """Write a configuration file with default settings."""
    config_file: Path = ctx.obj["config_file"]
    if (
        config_file.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    settings = {
        key: value
        for key, value in {
            "music_speed_mbps": music_speed,
            "video_speed_mbps": video_speed,
        }.items()
        if value is not None
    }
    try:
        ConfigManager(config_file).save_new_config(settings)
    except StorefrontError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    console.print(
        f"\n[bold green]✓ Configuration saved to '{config_file}'[/bold green]"
    )


@app.command(name="show-config")
def show_config(ctx: typer.Context):
    """Display the effective configuration."""
    config = _load_config(ctx)
    print_config(
        ctx.obj["config_file"],
        config.model_dump(include=StoreConfig.get_ini_keys()),
    )
