# psm_cli/interactive/context.py
"""State shared by the shell loop and the local commands."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console

from psm_cli.completion.completer import Completer, TabCompleter
from psm_cli.config import ShellConfig
from psm_cli.transport.tcp_client import Connection


@dataclass
class ShellContext:
    connection: Connection
    config: ShellConfig
    console: Console = field(default_factory=Console)
    completer: Optional[Completer] = None
    tab_completer: Optional[TabCompleter] = None
    verbose: bool = False
    next_id: int = 0

    def take_id(self) -> int:
        """Return the id for the next submitted command."""
        cid = self.next_id
        self.next_id += 1
        return cid
