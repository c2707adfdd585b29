"""Main CLI entry point for codex-bridge."""

import os

import typer
from rich.console import Console

from codex_bridge.cli.commands import config, convert

app = typer.Typer(
    name="codex-bridge",
    help="Codex Bridge CLI - convert Chat-Completions and Responses requests for Codex",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(convert.app, name="convert", help="Convert request bodies")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    from codex_bridge import __version__

    console = Console()
    console.print(f"[bold cyan]codex-bridge[/bold cyan] version [green]{__version__}[/green]")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Codex Bridge CLI."""
    from codex_bridge.core.logging import configure_root_logging

    # Read LOG_LEVEL directly so "config validate" can still report a broken config
    configure_root_logging("DEBUG" if verbose else os.environ.get("LOG_LEVEL", "INFO"))


if __name__ == "__main__":
    app()
