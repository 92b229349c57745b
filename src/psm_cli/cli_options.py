# psm_cli/cli_options.py
"""
Option-processing helpers for the psm-cli entry point.
"""
from __future__ import annotations

import logging
from typing import Tuple

import typer

logger = logging.getLogger(__name__)


def normalize_destination(dst: str, default_port: int) -> Tuple[str, int]:
    """
    Split ``host[:port]`` into ``(host, port)``, adding *default_port* when
    the port is missing. IPv6 addresses need brackets when a port is given
    (``[::1]:3994``); a bare IPv6 address takes the default port.
    """
    dst = dst.strip()
    if not dst:
        raise typer.BadParameter("destination must not be empty")

    host, port = dst, ""
    if dst.startswith("["):
        end = dst.find("]")
        if end < 0:
            raise typer.BadParameter(f"missing ']' in address {dst!r}")
        host, rest = dst[1:end], dst[end + 1:]
        if rest:
            if not rest.startswith(":"):
                raise typer.BadParameter(f"invalid address {dst!r}")
            port = rest[1:]
    elif dst.count(":") == 1:
        host, port = dst.split(":")

    if not host:
        raise typer.BadParameter(f"missing host in address {dst!r}")
    if not port:
        logger.debug("No port in %r, using %d", dst, default_port)
        return host, default_port
    if not port.isdigit() or not 0 < int(port) < 65536:
        raise typer.BadParameter(f"invalid port {port!r}")
    return host, int(port)
