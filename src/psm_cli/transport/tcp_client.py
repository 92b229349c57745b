# psm_cli/transport/tcp_client.py
"""
TCP connection to a PSM.

Commands go out as one JSON document per line. Replies are read as a
stream of JSON documents, which may span reads and lines. Calls are
strictly sequential: :meth:`Connection.run` sends a command and waits for
the next document, however long that takes. There is no timeout and no
retry; a lost connection ends the session.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Tuple

import anyio
from anyio.abc import SocketAttribute, SocketStream
from pydantic import ValidationError

from psm_cli.messages.exceptions import ConnectionClosed, ProtocolError
from psm_cli.messages.json_rpc_message import Command, Response

logger = logging.getLogger(__name__)

READ_SIZE = 65536

QUOTE, BACKSLASH = ord('"'), ord("\\")
OPENERS, CLOSERS = b"{[", b"}]"


def _document_end(buf: bytes) -> int:
    """
    Return the index just past the JSON object or array starting *buf*, or
    -1 if it is not complete yet.

    Works on raw bytes: no UTF-8 multi-byte sequence contains an ASCII byte.
    """
    depth = 0
    in_string = escaped = False
    for i, c in enumerate(buf):
        if in_string:
            if escaped:
                escaped = False
            elif c == BACKSLASH:
                escaped = True
            elif c == QUOTE:
                in_string = False
        elif c == QUOTE:
            in_string = True
        elif c in OPENERS:
            depth += 1
        elif c in CLOSERS:
            depth -= 1
            if depth == 0:
                return i + 1
    return -1


class Connection:
    """A JSON-RPC connection with a synchronous request/response contract."""

    def __init__(self, stream: SocketStream):
        self._stream = stream
        self._buffer = b""

    @classmethod
    async def open(cls, host: str, port: int) -> "Connection":
        logger.debug("Connecting to %s:%d", host, port)
        stream = await anyio.connect_tcp(host, port)
        return cls(stream)

    @property
    def remote_address(self) -> Tuple[Any, ...]:
        return self._stream.extra(SocketAttribute.remote_address)

    async def send(self, payload: dict) -> None:
        data = json.dumps(payload) + "\n"
        logger.debug("[send] %s", data.rstrip())
        try:
            await self._stream.send(data.encode("utf-8"))
        except (anyio.BrokenResourceError, anyio.ClosedResourceError, OSError) as exc:
            raise ConnectionClosed(f"connection lost: {exc}") from exc

    async def _fill(self) -> None:
        try:
            chunk = await self._stream.receive(READ_SIZE)
        except anyio.EndOfStream as exc:
            raise ConnectionClosed("connection closed by peer") from exc
        except (anyio.BrokenResourceError, anyio.ClosedResourceError, OSError) as exc:
            raise ConnectionClosed(f"connection lost: {exc}") from exc
        self._buffer += chunk

    async def receive(self) -> Any:
        """Return the next JSON document from the stream."""
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                if self._buffer[:1] not in (b"{", b"["):
                    raise ProtocolError(f"invalid response: {self._buffer[:40]!r}")
                end = _document_end(self._buffer)
                if end > 0:
                    doc, self._buffer = self._buffer[:end], self._buffer[end:]
                    try:
                        return json.loads(doc.decode("utf-8"))
                    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
                        raise ProtocolError(f"invalid response: {exc}") from exc
            await self._fill()

    async def run(self, command: Command) -> Response:
        """Send *command* and wait for exactly one response."""
        await self.send(command.model_dump())
        raw = await self.receive()
        logger.debug("[receive] %s", raw)
        try:
            return Response.model_validate(raw)
        except ValidationError as exc:
            raise ProtocolError(f"malformed response: {exc}") from exc

    async def close(self) -> None:
        await self._stream.aclose()

    async def __aenter__(self) -> "Connection":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
