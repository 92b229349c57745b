# psm_cli/messages/send_messages.py
"""
The handful of calls the shell makes on its own behalf.

Each helper sends one command over the connection and returns the reply;
errors reported by the service are left for the caller to inspect, except
for ``system.smd`` whose failure raises :class:`JSONRPCError`.
"""
from __future__ import annotations

import logging
from typing import Dict

from pydantic import ValidationError

from psm_cli.messages.exceptions import JSONRPCError, ProtocolError
from psm_cli.messages.json_rpc_message import Command, Response
from psm_cli.messages.smd import SMDResult, SMDService
from psm_cli.transport.tcp_client import Connection

logger = logging.getLogger(__name__)


async def send_version(conn: Connection) -> Response:
    """Call ``system.version``; doubles as the authentication probe."""
    return await conn.run(Command(method="system.version"))


async def send_hostname(conn: Connection) -> Response:
    return await conn.run(Command(method="system.hostname"))


async def send_login(conn: Connection, user: str, password: str) -> Response:
    logger.debug("Logging in as %s", user)
    return await conn.run(Command(method="system.login", params=[user, password]))


async def send_is_read_only(conn: Connection) -> Response:
    return await conn.run(Command(method="model.isReadOnly"))


async def send_smd(conn: Connection) -> Dict[str, SMDService]:
    """Fetch the service mapping description, keyed by dotted service name."""
    res = await conn.run(Command(method="system.smd"))
    if not res.ok:
        raise JSONRPCError(res.error.message, res.error.code)
    try:
        smd = SMDResult.model_validate(res.result or {})
    except ValidationError as exc:
        raise ProtocolError(f"malformed service description: {exc}") from exc
    logger.debug("Service description lists %d services", len(smd.services))
    return smd.services
