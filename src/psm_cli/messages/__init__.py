# psm_cli/messages/__init__.py
"""JSON-RPC message models, error codes and exceptions."""
from .json_rpc_message import Command, Response, ResponseError
from .smd import SMDParameter, SMDResult, SMDService

__all__ = [
    "Command",
    "Response",
    "ResponseError",
    "SMDParameter",
    "SMDResult",
    "SMDService",
]
