# psm_cli/interactive/commands/__init__.py
"""Local shell commands."""
from .help import HelpCommand
from .commands import CommandsCommand
from .clear import ClearCommand
from .exit import ExitCommand

# Export for convenience
__all__ = [
    "HelpCommand",
    "CommandsCommand",
    "ClearCommand",
    "ExitCommand",
]

def register_all_commands() -> None:
    """
    Register every local command in the central registry.
    """
    from psm_cli.interactive.registry import InteractiveCommandRegistry

    reg = InteractiveCommandRegistry
    reg.register(HelpCommand())
    reg.register(CommandsCommand())
    reg.register(ClearCommand())
    reg.register(ExitCommand())
