"""Configuration commands for the codex-bridge CLI."""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from codex_bridge.core.config import Config, ConfigError, ConfigSchema, validate_all

app = typer.Typer(help="Configuration management")


@app.command()
def show() -> None:
    """Show the effective configuration."""
    console = Console()

    try:
        settings = Config().as_dict()
    except ConfigError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    table = Table(title="Codex Bridge Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for key, value in settings.items():
        table.add_row(key, str(value))

    console.print(table)


@app.command()
def validate() -> None:
    """Validate every configuration environment variable."""
    console = Console()
    errors = validate_all()

    if errors:
        for error in errors:
            console.print(f"[red]❌ {escape(str(error))}[/red]")
        raise typer.Exit(1)

    console.print("[green]✅ Configuration is valid[/green]")


@app.command()
def docs() -> None:
    """Print Markdown documentation for all environment variables."""
    typer.echo(ConfigSchema.generate_markdown_docs())
