# psm_cli/completion/builder.py
"""
Build the completion graph from the services announced by ``system.smd``.

Every service ``"ns.cmd"`` becomes the path ``ns -> cmd -> <param> ...``.
Services sharing a namespace share the root literal.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Mapping, Union

from psm_cli.completion.matchers import Alternatives, Literal, Matcher, Pattern
from psm_cli.messages.smd import SMDParameter, SMDService

logger = logging.getLogger(__name__)

INTEGER = re.compile(r"\d+")
ANY = re.compile(r".+")

# A required string parameter called "type" always is one of these.
OBJECT_TYPES = ("session", "subscriber", "group")

ServiceLike = Union[SMDService, Mapping[str, Any]]


def _as_service(name: str, service: ServiceLike) -> SMDService:
    if isinstance(service, SMDService):
        return service
    return SMDService.model_validate({"name": name, **service})


def parameter_matcher(param: SMDParameter) -> Matcher:
    """Return the matcher for a single service parameter."""
    if param.name == "type" and not param.optional and param.type == "string":
        return Alternatives([Literal(t) for t in OBJECT_TYPES])
    exp = INTEGER if param.type == "integer" else ANY
    return Pattern(exp, param.name, optional=param.optional)


def import_services(services: Mapping[str, ServiceLike]) -> List[Matcher]:
    """
    Convert a ``{name: service}`` mapping into a list of root matchers.

    Services are imported in name order so the resulting forest (and the
    help output derived from it) does not depend on the reply's key order.
    """
    roots: Dict[str, Literal] = {}

    for name in sorted(services):
        service = _as_service(name, services[name])
        ns, _, cmd = name.partition(".")

        root = roots.get(ns)
        if root is None:
            root = roots[ns] = Literal(ns)

        tail: Matcher = root
        if cmd:
            tail = Literal(cmd)
            root.add_next(tail)

        for param in service.parameters:
            matcher = parameter_matcher(param)
            tail.add_next(matcher)
            tail = matcher

    logger.debug("Imported %d services into %d namespaces", len(services), len(roots))
    return list(roots.values())
