"""
Command-line entry point for the Obsidian vault MCP server.
"""

import contextlib
import logging
import os
import signal
import sys

import anyio
import typer

from . import __version__
from .config import load_config
from .exceptions import ConfigurationError
from .server_stdio import run_stdio

HELP = """
Obsidian Local REST API MCP Server

This is an MCP server that communicates via stdio. It should be configured
in your MCP client (like Claude Desktop) rather than run directly.

\b
Environment Variables:
  OBSIDIAN_API_URL          Base URL for Obsidian REST API (default: http://localhost:8000)
  OBSIDIAN_API_KEY          Optional bearer token for authentication
  OBSIDIAN_REQUEST_TIMEOUT  Request timeout in seconds (default: 30)
  DEBUG                     Set to "true" for debug logging

\b
Example MCP client configuration:
  {
    "mcpServers": {
      "obsidian-vault": {
        "command": "obsidian-vault-mcp",
        "env": {"OBSIDIAN_API_URL": "http://localhost:8000"}
      }
    }
  }
"""

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _log(message: str) -> None:
    """Print to stderr. Safe for STDIO (stdout is JSON-RPC only)."""
    print(message, file=sys.stderr, flush=True)


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    # Suppress noisy library logs
    logging.getLogger("mcp.server.lowlevel.server").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _exit_on_signal(signum, frame) -> None:
    """Stop at once with exit code 0. The stdio reader thread is blocked on stdin and cannot be cancelled."""
    _log(f"Received {signal.Signals(signum).name}, shutting down")
    with contextlib.suppress(OSError, ValueError):
        sys.stdout.flush()
        sys.stderr.flush()
    os._exit(0)


def install_signal_handlers() -> dict[int, object]:
    """Exit on SIGINT/SIGTERM; returns the previous handlers"""
    previous = {}
    for signum in (signal.SIGINT, signal.SIGTERM):
        previous[signum] = signal.signal(signum, _exit_on_signal)
    return previous


def restore_signal_handlers(previous: dict[int, object]) -> None:
    for signum, handler in previous.items():
        signal.signal(signum, handler)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command(help=HELP)
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version number",
    ),
) -> None:
    try:
        config = load_config()
    except ConfigurationError as e:
        _log("❌ Configuration errors:")
        for error in e.errors:
            _log(f"  - {error}")
        raise typer.Exit(1)

    configure_logging(config.debug)
    previous_handlers = install_signal_handlers()

    try:
        anyio.run(run_stdio, config)
    except KeyboardInterrupt:
        _log("Shutting down server...")
    except Exception as e:
        _log(f"❌ Error: {e}")
        import traceback

        traceback.print_exc(file=sys.stderr)
        raise typer.Exit(1)
    finally:
        restore_signal_handlers(previous_handlers)


if __name__ == "__main__":
    app()
