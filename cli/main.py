"""StreamScout CLI — entry-point for resolving links from the terminal.

Usage:
    python cli/main.py --help

Commands:
    resolve   → run the two-hop pipeline against a gateway URL
    key       → encode / decode deep-link keys
    serve     → run the HTTP API with uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from streamscout.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import json
from typing import Optional

import typer

from streamscout.config import settings
from streamscout.logging_setup import setup_logging
from streamscout.scraper import ResolveError, process_url

from cli.commands.keys import key_app
from cli.rendering import render_result

app = typer.Typer(
    name="streamscout",
    help="StreamScout link resolver CLI.",
    no_args_is_help=True,
)
app.add_typer(key_app, name="key")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL."),
) -> None:
    setup_logging(log_level)


# ---------------------------------------------------------------------------
# Resolve
# ---------------------------------------------------------------------------
@app.command("resolve")
def resolve(
    url: str = typer.Argument(..., help="Gateway page URL."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON result."),
) -> None:
    """Resolve a gateway URL into ranked download links."""
    if not as_json:
        typer.echo(f"[resolve] Resolving {url!r} …")
    try:
        result = asyncio.run(process_url(url))
    except ResolveError as exc:
        typer.echo(f"[resolve] ✗ {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return
    typer.echo(render_result(result))


# ---------------------------------------------------------------------------
# Serve
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)."),
    port: Optional[int] = typer.Option(None, help="Port (default: API_PORT)."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the HTTP API."""
    import uvicorn  # noqa: PLC0415

    uvicorn.run(
        "streamscout.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
