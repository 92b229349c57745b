# psm_cli/messages/exceptions.py
"""
Custom exception classes for command parsing and the PSM connection.
"""


class PSMCliError(Exception):
    """Base class for all psm-cli errors."""


class MalformedCommand(PSMCliError):
    """The typed line does not name a namespace and a command."""


class MalformedLiteral(PSMCliError):
    """A ``{...}`` parameter is not a valid JSON object."""


class ConnectionClosed(PSMCliError):
    """The service closed the connection."""


class ProtocolError(PSMCliError):
    """The service sent something that is not a JSON-RPC response."""


class JSONRPCError(PSMCliError):
    """An error reply to a call the shell itself made."""
    def __init__(self, message, code):
        super().__init__(message)
        self.code = code
