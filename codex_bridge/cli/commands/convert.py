"""Conversion commands for the codex-bridge CLI."""

import sys
import uuid
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape

from codex_bridge.conversion.chat_to_responses import build_codex_request
from codex_bridge.conversion.document import JsonDocument, parse_request_body
from codex_bridge.conversion.responses_normalizer import normalize_codex_request
from codex_bridge.core.config import ConfigError
from codex_bridge.core.error_types import ConversionError
from codex_bridge.core.logging import ConversationLogger

app = typer.Typer(help="Convert request bodies")

FILE_ARGUMENT = typer.Argument(..., help="Request JSON file, or '-' for stdin")
MODEL_OPTION = typer.Option("gpt-5-codex", "--model", "-m", help="Model name for the request")
STRICT_OPTION = typer.Option(
    None,
    "--strict/--lenient",
    help="Fail on malformed input instead of skipping it (default from config)",
)


def _read_body(file: str) -> bytes:
    if file == "-":
        return sys.stdin.buffer.read()
    return Path(file).read_bytes()


def _strict_or_default(strict: Optional[bool]) -> bool:
    if strict is None:
        from codex_bridge.core.config.accessors import strict_conversion

        return strict_conversion()
    return strict


def _print_result(console: Console, result: dict[str, Any]) -> None:
    console.print_json(JsonDocument(result).to_bytes().decode("utf-8"))


@app.command()
def chat(
    file: str = FILE_ARGUMENT,
    model: str = MODEL_OPTION,
    stream: bool = typer.Option(True, "--stream/--no-stream", help="Request a streamed response"),
    strict: Optional[bool] = STRICT_OPTION,
) -> None:
    """Convert a Chat-Completions request into a Responses request."""
    console = Console()
    err_console = Console(stderr=True)
    with ConversationLogger.correlation_context(uuid.uuid4().hex):
        try:
            is_strict = _strict_or_default(strict)
            source = parse_request_body(_read_body(file), is_strict)
            result = build_codex_request(model, source.data, stream, strict=is_strict)
        except OSError as e:
            err_console.print(f"[red]❌ Cannot read {escape(file)}: {escape(str(e))}[/red]")
            raise typer.Exit(1) from e
        except (ConfigError, ConversionError) as e:
            err_console.print(f"[red]❌ Conversion failed: {escape(str(e))}[/red]")
            raise typer.Exit(1) from e

    _print_result(console, result)


@app.command()
def responses(
    file: str = FILE_ARGUMENT,
    model: str = MODEL_OPTION,
    strict: Optional[bool] = STRICT_OPTION,
) -> None:
    """Normalize a Responses request for the Codex backend."""
    console = Console()
    err_console = Console(stderr=True)
    with ConversationLogger.correlation_context(uuid.uuid4().hex):
        try:
            is_strict = _strict_or_default(strict)
            source = parse_request_body(_read_body(file), is_strict)
            result = normalize_codex_request(model, source.data, True, strict=is_strict)
        except OSError as e:
            err_console.print(f"[red]❌ Cannot read {escape(file)}: {escape(str(e))}[/red]")
            raise typer.Exit(1) from e
        except (ConfigError, ConversionError) as e:
            err_console.print(f"[red]❌ Conversion failed: {escape(str(e))}[/red]")
            raise typer.Exit(1) from e

    _print_result(console, result)
