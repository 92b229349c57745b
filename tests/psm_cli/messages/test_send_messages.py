# tests/psm_cli/messages/test_send_messages.py
from typing import List

import pytest

from psm_cli.messages.exceptions import JSONRPCError, ProtocolError
from psm_cli.messages.json_rpc_message import Command, Response
from psm_cli.messages.send_messages import (
    send_hostname,
    send_is_read_only,
    send_login,
    send_smd,
    send_version,
)

pytestmark = [pytest.mark.asyncio]


class DummyConnection:
    def __init__(self, *responses: dict):
        self.responses = [Response.model_validate(r) for r in responses]
        self.commands: List[Command] = []

    async def run(self, command: Command) -> Response:
        self.commands.append(command)
        return self.responses.pop(0)


async def test_simple_calls_use_expected_methods():
    conn = DummyConnection({"result": "1.0"}, {"result": "psm"}, {"result": False})

    assert (await send_version(conn)).result == "1.0"
    assert (await send_hostname(conn)).result == "psm"
    assert (await send_is_read_only(conn)).result is False
    assert [c.method for c in conn.commands] == [
        "system.version",
        "system.hostname",
        "model.isReadOnly",
    ]


async def test_login_sends_credentials():
    conn = DummyConnection({"result": True})
    await send_login(conn, "admin", "s3cret")
    [cmd] = conn.commands
    assert cmd.method == "system.login"
    assert cmd.params == ["admin", "s3cret"]


async def test_smd_returns_services():
    conn = DummyConnection(
        {
            "result": {
                "services": {
                    "system.hostname": {"parameters": []},
                    "object.get": {"parameters": [{"name": "aid", "type": "integer"}]},
                }
            }
        }
    )
    services = await send_smd(conn)
    assert sorted(services) == ["object.get", "system.hostname"]
    assert services["object.get"].parameters[0].type == "integer"


async def test_smd_error_raises():
    conn = DummyConnection({"error": {"code": -20001, "message": "Access denied"}})
    with pytest.raises(JSONRPCError) as exc_info:
        await send_smd(conn)
    assert exc_info.value.code == -20001


async def test_smd_malformed_raises():
    conn = DummyConnection({"result": {"services": {"a.b": {"parameters": [{"optional": 1}]}}}})
    with pytest.raises(ProtocolError):
        await send_smd(conn)
