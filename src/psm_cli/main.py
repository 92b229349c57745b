# psm_cli/main.py
"""Entry-point for the PSM CLI."""
from __future__ import annotations

import asyncio
import logging
import signal
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

# ──────────────────────────────────────────────────────────────────────────────
# local imports
# ──────────────────────────────────────────────────────────────────────────────
from psm_cli import __version__
from psm_cli.cli_options import normalize_destination
from psm_cli.config import ShellConfig
from psm_cli.interactive.context import ShellContext
from psm_cli.interactive.shell import interactive_mode
from psm_cli.messages.exceptions import PSMCliError
from psm_cli.transport.tcp_client import Connection
from psm_cli.ui.ui_helpers import restore_terminal

# ──────────────────────────────────────────────────────────────────────────────
# logging
# ──────────────────────────────────────────────────────────────────────────────
logging.basicConfig(
    format="%(asctime)s  %(levelname)-8s  %(message)s",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────────────────────────────────────
# Typer root app
# ──────────────────────────────────────────────────────────────────────────────
app = typer.Typer(add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        print("psm-cli", __version__)
        raise typer.Exit()


async def _session(host: str, port: int, config: ShellConfig, verbose: bool) -> bool:
    console = Console()
    conn = await Connection.open(host, port)
    async with conn:
        remote = conn.remote_address
        console.print(f"Connected to {remote[0]}:{remote[1]}", highlight=False)
        console.print()
        context = ShellContext(connection=conn, config=config, console=console, verbose=verbose)
        return await interactive_mode(context)


@app.command()
def main(  # noqa: D401
    destination: str = typer.Argument(..., help="PSM address, host[:port]"),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Print each command sent and debug logging"
    ),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
    config_file: Optional[str] = typer.Option(
        None, "--config", "-c", help="Configuration file path"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the version and exit",
    ),
) -> None:
    """Interactive command shell for a PSM."""
    config = ShellConfig(config_file)

    level = config.log_level
    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "ERROR"
    logging.getLogger().setLevel(level)

    host, port = normalize_destination(destination, config.default_port)

    print("psm-cli", __version__)
    print("^D to quit")

    console = Console()
    try:
        asyncio.run(_session(host, port, config, verbose))
    except (PSMCliError, OSError) as exc:
        logger.debug("Session ended", exc_info=True)
        console.print(Panel(str(exc), title="Fatal Error", style="bold red"))
        raise typer.Exit(1)
    finally:
        restore_terminal()


# ──────────────────────────────────────────────────────────────────────────────
# graceful shutdown
# ──────────────────────────────────────────────────────────────────────────────
def _signal_handler(sig, _frame):
    logging.debug("Received signal %s, restoring terminal", sig)
    restore_terminal()
    sys.exit(0)


def _setup_signal_handlers() -> None:
    signal.signal(signal.SIGTERM, _signal_handler)
    if hasattr(signal, "SIGQUIT"):
        signal.signal(signal.SIGQUIT, _signal_handler)


def cli() -> None:
    """Console-script entry point."""
    _setup_signal_handlers()
    app()


if __name__ == "__main__":
    cli()
