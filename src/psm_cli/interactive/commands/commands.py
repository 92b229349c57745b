# psm_cli/interactive/commands/commands.py
"""
Interactive "commands" command - print the tree of PSM commands.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

from psm_cli.ui import colors

from .base import InteractiveCommand

if TYPE_CHECKING:
    from psm_cli.interactive.context import ShellContext


class CommandsCommand(InteractiveCommand):
    """List the commands announced by the PSM, with their parameters."""

    def __init__(self) -> None:
        super().__init__(
            name="commands",
            help_text="Print available PSM commands. Commands have tab completion available.",
        )

    async def execute(self, args: List[str], context: "ShellContext") -> Any:
        if context.completer is None:
            context.console.print("No command list available.", style=colors.TEXT_WARNING)
            return
        context.completer.print_help(context.console, styled=context.config.styled_help)
