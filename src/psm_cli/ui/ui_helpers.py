# psm_cli/ui/ui_helpers.py
"""
Shared Rich helpers for the PSM shell.
"""
from __future__ import annotations

import json
import os
import sys
from typing import Any, Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from psm_cli.messages.error_codes import get_error_message
from psm_cli.messages.json_rpc_message import Response
from psm_cli.ui import colors

# --------------------------------------------------------------------------- #
# generic helpers                                                             #
# --------------------------------------------------------------------------- #
_console = Console()

USAGE = """\
Usage:

help, ?:
    Print this help

commands:
    Print available PSM commands. Commands have tab completion available.

clear:
    Clear the screen

exit, quit:
    Leave the shell (^D works too)

Examples:

Simple command without parameter:
    $ system hostname

Command with parameters:
    $ object deleteByAid subscriber 1234

Command with object parameters:
    $ object updateByAid subscriber 1234 attr=value
    $ object updateByAid subscriber 1234 attr1=value1,attr2=value2

    (No spaces in the object parameter!)

Command with arbitrary JSON object parameter:
    $ object updateByAid subscriber 1234
        {"attr1": "value1 with space", "attr2": "value2"}

    (Line break for display purposes only)
"""


def clear_screen(console: Optional[Console] = None) -> None:
    """Clear the terminal (cross-platform)."""
    (console or _console).clear()


def restore_terminal() -> None:
    """Restore terminal settings after raw-mode line editing."""
    if sys.stdin.isatty() and os.name == "posix":
        os.system("stty sane")


def _dump(value: Any) -> str:
    return json.dumps(value, indent=4, ensure_ascii=False)


def _scalar(value: Any) -> str:
    # strings print bare, everything else the way JSON spells it
    return value if isinstance(value, str) else json.dumps(value)


def print_response(response: Response, console: Optional[Console] = None) -> None:
    """
    Render a reply from the PSM.

    Errors print as ``Error <code>: <message>``, with the standard text for
    well-known codes when the reply carries no message. List results print
    scalars one per line and structures as indented JSON; objects print as
    indented JSON; other scalars print as-is. An empty result prints nothing.
    """
    console = console or _console

    if not response.ok:
        message = response.error.message or get_error_message(response.error.code)
        console.print(
            f"Error {response.error.code}: {message}",
            style=colors.TEXT_ERROR,
            markup=False,
            highlight=False,
        )
        return

    result = response.result
    if result is None:
        return

    if isinstance(result, list):
        for item in result:
            if isinstance(item, (dict, list)):
                console.print(_dump(item) + "\n", markup=False, highlight=False)
            else:
                console.print(_scalar(item), markup=False, highlight=False)
    elif isinstance(result, dict):
        console.print(_dump(result) + "\n", markup=False, highlight=False)
    else:
        console.print(_scalar(result), markup=False, highlight=False)


def print_usage_help(console: Optional[Console] = None) -> None:
    (console or _console).print(USAGE, markup=False, highlight=False)


# --------------------------------------------------------------------------- #
# welcome banner                                                              #
# --------------------------------------------------------------------------- #
def display_welcome_banner(version: str, hostname: str, console: Optional[Console] = None) -> None:
    """Print one banner identifying the PSM we are talking to."""
    (console or _console).print(
        Panel(
            Markdown(
                f"**PSM version** {version} at **{hostname}**\n\n"
                "Type **`help`** for usage, **`commands`** for the command list."
            ),
            title="PSM CLI",
            border_style=colors.BORDER_PRIMARY,
            expand=True,
        )
    )
