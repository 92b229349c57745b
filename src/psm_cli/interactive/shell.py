# psm_cli/interactive/shell.py
"""Interactive shell against a PSM, with tab completion of its commands."""
from __future__ import annotations
import json
import logging
from typing import Any, Optional, Tuple

from prompt_toolkit import PromptSession

# psm cli
from psm_cli.completion.builder import import_services
from psm_cli.completion.completer import Completer, TabCompleter
from psm_cli.completion.prompt import MatcherCompleter, tab_key_bindings
from psm_cli.interactive.commands import register_all_commands
from psm_cli.interactive.context import ShellContext
from psm_cli.interactive.registry import InteractiveCommandRegistry
from psm_cli.messages import error_codes
from psm_cli.messages.exceptions import MalformedCommand, MalformedLiteral
from psm_cli.messages.json_rpc_message import Response
from psm_cli.messages.send_messages import (
    send_hostname,
    send_is_read_only,
    send_login,
    send_smd,
    send_version,
)
from psm_cli.parse import parse_command
from psm_cli.ui import colors
from psm_cli.ui.ui_helpers import display_welcome_banner, print_response

# logger
logger = logging.getLogger(__name__)

UNKNOWN = "(unknown)"


def _string_result(res: Response) -> str:
    return res.result if res.ok and isinstance(res.result, str) else UNKNOWN


async def login(context: ShellContext, session: Any, res: Response) -> Tuple[str, Response]:
    """
    Prompt for credentials until the PSM stops denying access.

    *res* is the reply to the ``system.version`` probe. Returns the user name
    and the first successful ``system.version`` reply.
    """
    user = "default"
    while res.error.code == error_codes.ACCESS_DENIED:
        user = await session.prompt_async("Username: ")
        password = await session.prompt_async("Password: ", is_password=True)
        login_res = await send_login(context.connection, user, password)
        if not login_res.ok:
            context.console.print(login_res.error.message, markup=False, highlight=False)
            context.console.print()
            continue
        res = await send_version(context.connection)
    return user, res


def build_prompt(user: str, hostname: str, read_only: bool) -> str:
    """``user@host # `` for a writable model, ``user@host $ `` otherwise."""
    short = hostname.split(".", 1)[0]
    marker = " $ " if read_only else " # "
    return f"{user}@{short}{marker}"


def build_session(context: ShellContext, completer: Completer) -> PromptSession:
    """Create the REPL prompt session for the configured completion mode."""
    if context.config.completion_mode == "menu":
        return PromptSession(
            completer=MatcherCompleter(completer),
            complete_while_typing=False,
        )
    context.tab_completer = TabCompleter(*completer.matchers)
    return PromptSession(key_bindings=tab_key_bindings(context.tab_completer))


async def run_line(context: ShellContext, line: str) -> bool:
    """
    Handle one submitted line. Returns ``True`` when the session should end.

    Connection errors propagate; they are fatal to the session.
    """
    # local commands are whole lines; PSM commands have at least two words
    parts = line.split()
    if len(parts) == 1:
        cmd = InteractiveCommandRegistry.get_command(parts[0].lower())
        if cmd:
            return await cmd.execute([], context) is True

    try:
        command = parse_command(line, context.config.filter_prefixes)
    except (MalformedCommand, MalformedLiteral) as exc:
        context.console.print(str(exc), style=colors.TEXT_ERROR, markup=False, highlight=False)
        return False

    command.id = context.take_id()
    if context.verbose:
        context.console.print(
            f"> {json.dumps(command.model_dump())}", markup=False, highlight=False
        )

    res = await context.connection.run(command)
    print_response(res, context.console)
    return False


async def interactive_mode(context: ShellContext, session: Optional[Any] = None) -> bool:
    """
    Authenticate, set up completion from the PSM's service description and
    run the read-eval-print loop until EOF or ``exit``.
    """
    conn = context.connection
    console = context.console

    register_all_commands()

    # system.version doubles as the check whether we need to log in
    res = await send_version(conn)
    user = "default"
    if res.error.code == error_codes.ACCESS_DENIED:
        user, res = await login(context, session or PromptSession(), res)

    version = _string_result(res)
    hostname = _string_result(await send_hostname(conn))
    display_welcome_banner(version, hostname, console)

    ro = await send_is_read_only(conn)
    prompt = build_prompt(user, hostname, ro.ok and ro.result is True)

    # tab completion based on announced commands and parameters
    services = await send_smd(conn)
    context.completer = Completer(*import_services(services))
    logger.debug("Completion set up for %d services", len(services))

    if session is None:
        session = build_session(context, context.completer)

    while True:
        # each prompt starts a new line; Enter never reaches the tab controller
        if context.tab_completer is not None:
            context.tab_completer.state.reset()
        try:
            raw = await session.prompt_async(prompt)
        except KeyboardInterrupt:
            continue
        except EOFError:
            return True

        line = raw.strip()
        if not line:
            continue
        if await run_line(context, line):
            return True
