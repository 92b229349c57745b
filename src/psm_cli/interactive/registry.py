# psm_cli/interactive/registry.py
"""Registry for the shell's local (non-PSM) commands."""
from __future__ import annotations
import logging
from typing import Dict, Optional

# commands
from psm_cli.interactive.commands.base import InteractiveCommand

# logger
logger = logging.getLogger(__name__)

class InteractiveCommandRegistry:
    """Registry for interactive commands."""

    _commands: Dict[str, InteractiveCommand] = {}
    _aliases: Dict[str, str] = {}

    @classmethod
    def register(cls, command: InteractiveCommand) -> None:
        """Register a command under its name and any aliases."""
        cls._commands[command.name] = command
        for alias in command.aliases:
            cls._aliases[alias] = command.name

    @classmethod
    def get_command(cls, name: str) -> Optional[InteractiveCommand]:
        """Retrieve a command by name or alias."""
        # resolve alias
        if name in cls._aliases:
            name = cls._aliases[name]
        return cls._commands.get(name)

    @classmethod
    def get_all_commands(cls) -> Dict[str, InteractiveCommand]:
        """Return the mapping of all registered commands."""
        return cls._commands
