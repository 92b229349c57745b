# psm_cli/interactive/commands/exit.py
from typing import TYPE_CHECKING, List

from .base import InteractiveCommand

if TYPE_CHECKING:
    from psm_cli.interactive.context import ShellContext


class ExitCommand(InteractiveCommand):
    """Command to leave the shell."""
    def __init__(self):
        super().__init__(
            name="exit",
            help_text="Leave the shell.",
            aliases=["quit", "q"],
        )

    async def execute(self, args: List[str], context: "ShellContext") -> bool:
        """Execute the exit command."""
        return True
