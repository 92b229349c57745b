# psm_cli/interactive/commands/base.py
"""Base class for local shell commands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List

if TYPE_CHECKING:
    from psm_cli.interactive.context import ShellContext


class InteractiveCommand(ABC):
    """Base class for commands handled by the shell instead of the PSM."""

    name: str
    help: str
    aliases: List[str]

    def __init__(self, name: str, help_text: str = "", aliases: List[str] = None):
        self.name = name
        self.help = help_text
        self.aliases = aliases or []

    @abstractmethod
    async def execute(self, args: List[str], context: "ShellContext") -> Any:
        """Execute the command; returning ``True`` ends the session."""
        pass
