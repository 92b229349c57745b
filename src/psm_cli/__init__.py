# psm_cli/__init__.py
"""
PSM-CLI package root.

Early-loads environment variables from a .env file so that settings such as
``PSM_CLI_PORT`` can be provided without exporting them in the shell.

Nothing else should be imported from here to keep side-effects minimal.
"""
from __future__ import annotations

import logging

from dotenv import load_dotenv

__version__ = "0.4.0"

if load_dotenv():  # returns True if a .env file was found
    logging.getLogger(__name__).debug(".env loaded successfully")
