# psm_cli/interactive/commands/help.py
"""
Interactive "help" command - usage and examples.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

from psm_cli.ui.ui_helpers import print_usage_help

from .base import InteractiveCommand

if TYPE_CHECKING:
    from psm_cli.interactive.context import ShellContext


class HelpCommand(InteractiveCommand):
    """Print usage and command line examples."""

    def __init__(self) -> None:
        super().__init__(
            name="help",
            aliases=["?"],
            help_text="Print this help.",
        )

    async def execute(self, args: List[str], context: "ShellContext") -> Any:
        print_usage_help(context.console)
