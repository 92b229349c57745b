# psm_cli/transport/__init__.py
"""Transport to the PSM."""
from .tcp_client import Connection

__all__ = ["Connection"]
