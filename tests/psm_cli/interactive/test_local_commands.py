# tests/psm_cli/interactive/test_local_commands.py
import io

import pytest
from rich.console import Console

from psm_cli.completion.completer import Completer
from psm_cli.completion.matchers import Literal, Pattern
from psm_cli.config import ShellConfig
from psm_cli.interactive.commands import ClearCommand, CommandsCommand, ExitCommand, HelpCommand
from psm_cli.interactive.context import ShellContext


@pytest.fixture
def context(tmp_path):
    console = Console(file=io.StringIO(), width=100, color_system=None)
    return ShellContext(
        connection=None,
        config=ShellConfig(str(tmp_path / "config.json")),
        console=console,
    )


def _out(context):
    return context.console.file.getvalue()


@pytest.mark.asyncio
async def test_help_prints_usage(context):
    await HelpCommand().execute([], context)
    assert "help, ?:" in _out(context)


@pytest.mark.asyncio
async def test_commands_prints_tree(context):
    context.completer = Completer(
        Literal("object", next=[Literal("delete", next=[Pattern(r"\d+", "aid")])])
    )
    await CommandsCommand().execute([], context)
    assert _out(context).splitlines() == ["object delete <aid>"]


@pytest.mark.asyncio
async def test_commands_without_completer(context):
    await CommandsCommand().execute([], context)
    assert "No command list" in _out(context)


@pytest.mark.asyncio
async def test_exit_ends_session(context):
    assert await ExitCommand().execute([], context) is True


@pytest.mark.asyncio
async def test_clear_uses_console(context, monkeypatch):
    cleared = []
    monkeypatch.setattr(Console, "clear", lambda self, home=True: cleared.append(self))
    await ClearCommand().execute([], context)
    assert cleared == [context.console]


def test_context_ids_increment(context):
    assert [context.take_id() for _ in range(3)] == [0, 1, 2]
