"""
Shell configuration management for PSM-CLI.

Settings are read from ``~/.psm-cli/config.json`` and *deep-merged* with
the baked-in ``DEFAULTS`` on every load:

* Missing keys are filled in from the defaults.
* User-overridden keys always take precedence.
* Environment variables (``PSM_CLI_PORT``, ``PSM_CLI_COMPLETION``) win over
  both.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# global defaults
# ---------------------------------------------------------------------------
DEFAULTS: Dict[str, Any] = {
    "default_port": 3994,
    # "cycle": tab cycles in place, "menu": prompt_toolkit completion menu
    "completion_mode": "cycle",
    "styled_help": True,
    # words starting with these are never split into key=value objects
    "filter_prefixes": ["("],
    "log_level": "WARNING",
}

COMPLETION_MODES = ("cycle", "menu")

ENV_OVERRIDES = {
    "PSM_CLI_PORT": ("default_port", int),
    "PSM_CLI_COMPLETION": ("completion_mode", str),
}

CFG_PATH = Path(os.path.expanduser("~/.psm-cli/config.json"))


class ShellConfig:
    """Load shell settings merged over the defaults."""

    # ------------------------------------------------------------------
    # construction & I/O
    # ------------------------------------------------------------------
    def __init__(self, config_path: Optional[str] = None) -> None:
        self._path = Path(os.path.expanduser(config_path)) if config_path else CFG_PATH
        self.settings: Dict[str, Any] = self._load()

    # ------------------------------------------------------------------
    # private helpers
    # ------------------------------------------------------------------
    def _load(self) -> Dict[str, Any]:
        """Return defaults overlaid with the on-disk file and environment."""
        on_disk: Dict[str, Any] = {}
        if self._path.is_file():
            try:
                on_disk = json.loads(self._path.read_text())
            except json.JSONDecodeError:
                logger.error("Invalid JSON in config file '%s'", self._path)
            except OSError as exc:
                logger.error("Error loading config file: %s", exc)
            if not isinstance(on_disk, dict):
                logger.error("Config file '%s' is not a JSON object", self._path)
                on_disk = {}

        merged: Dict[str, Any] = json.loads(json.dumps(DEFAULTS))
        merged.update(on_disk)

        for env, (key, convert) in ENV_OVERRIDES.items():
            value = os.getenv(env)
            if value is None:
                continue
            try:
                merged[key] = convert(value)
            except ValueError:
                logger.warning("Ignoring invalid %s=%r", env, value)

        if merged.get("completion_mode") not in COMPLETION_MODES:
            logger.warning(
                "Unknown completion mode %r, using 'cycle'", merged.get("completion_mode")
            )
            merged["completion_mode"] = "cycle"
        return merged

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, DEFAULTS.get(key, default))

    # ── convenience getters ─────────────────────────────────────────
    @property
    def default_port(self) -> int:
        return int(self.get("default_port"))

    @property
    def completion_mode(self) -> str:
        return self.get("completion_mode")

    @property
    def styled_help(self) -> bool:
        return bool(self.get("styled_help"))

    @property
    def filter_prefixes(self) -> List[str]:
        return list(self.get("filter_prefixes") or [])

    @property
    def log_level(self) -> str:
        return str(self.get("log_level")).upper()
