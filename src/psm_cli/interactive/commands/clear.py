# psm_cli/interactive/commands/clear.py
from typing import TYPE_CHECKING, Any, List

# psm cli
from psm_cli.ui.ui_helpers import clear_screen

from .base import InteractiveCommand

if TYPE_CHECKING:
    from psm_cli.interactive.context import ShellContext


class ClearCommand(InteractiveCommand):
    """Command to clear the screen."""

    def __init__(self):
        super().__init__(
            name="clear",
            help_text="Clear the terminal screen.",
            aliases=["cls"],
        )

    async def execute(self, args: List[str], context: "ShellContext") -> Any:
        """Execute the clear command."""
        clear_screen(context.console)
