# psm_cli/parse.py
"""
Turn a typed line into a :class:`~psm_cli.messages.Command`.

    object updateByAid subscriber 1234 attr1=value1,attr2=value2
    object updateByAid subscriber 1234 {"attr1": "value with space"}

The first two words form the method (``object.updateByAid``). A word
starting with ``{`` is a JSON object and may contain whitespace; a word
containing ``=`` becomes a key/value object; anything else is passed on as a
string.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, List

from psm_cli.messages.exceptions import MalformedCommand, MalformedLiteral
from psm_cli.messages.json_rpc_message import Command

logger = logging.getLogger(__name__)

# "(" starts an LDAP style filter expression, which may well contain "=".
DEFAULT_FILTER_PREFIXES = ("(",)


def _scan_literal(line: str, start: int) -> int:
    """Return the index just past the JSON object starting at *start*."""
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(line)):
        c = line[i]
        if in_string:
            if escaped:
                escaped = False
            elif c == "\\":
                escaped = True
            elif c == '"':
                in_string = False
        elif c == '"':
            in_string = True
        elif c == "{":
            depth += 1
        elif c == "}":
            depth -= 1
            if depth == 0:
                return i + 1
    # unterminated, the rest of the line is the literal
    return len(line)


def split_fields(line: str) -> List[str]:
    """Split *line* on whitespace, keeping ``{...}`` literals in one piece."""
    fields: List[str] = []
    i, n = 0, len(line)
    while i < n:
        if line[i].isspace():
            i += 1
            continue
        start = i
        if line[i] == "{":
            i = _scan_literal(line, i)
        else:
            while i < n and not line[i].isspace():
                i += 1
        fields.append(line[start:i])
    return fields


def parse_object(field: str) -> Dict[str, str]:
    """Parse ``key=val[,key=val...]``; bare keys map to the empty string."""
    obj: Dict[str, str] = {}
    for part in field.split(","):
        key, _, value = part.partition("=")
        obj[key] = value
    return obj


def parse_param(field: str, filter_prefixes: Iterable[str] = DEFAULT_FILTER_PREFIXES) -> Any:
    if field.startswith("{"):
        try:
            obj = json.loads(field)
        except json.JSONDecodeError as exc:
            raise MalformedLiteral(f"invalid JSON object {field!r}: {exc}") from exc
        if not isinstance(obj, dict):
            raise MalformedLiteral(f"invalid JSON object {field!r}")
        return obj
    if "=" in field and not field.startswith(tuple(filter_prefixes)):
        return parse_object(field)
    return field


def parse_command(
    line: str,
    filter_prefixes: Iterable[str] = DEFAULT_FILTER_PREFIXES,
) -> Command:
    """
    Parse *line* into a Command.

    Raises
    ------
    MalformedCommand
        Fewer than two words were given.
    MalformedLiteral
        A ``{...}`` parameter is not a JSON object.
    """
    fields = split_fields(line)
    if len(fields) < 2:
        raise MalformedCommand("incomplete command")

    prefixes = tuple(filter_prefixes)
    cmd = Command(
        method=f"{fields[0]}.{fields[1]}",
        params=[parse_param(f, prefixes) for f in fields[2:]],
    )
    logger.debug("Parsed %r into %s", line, cmd.method)
    return cmd
