"""JSON-file backed key/value store.

Used for the generators' global configuration (``~/.yo-rc-global.json``)
and for the insight opt-out flag.  A missing or corrupt file reads as an
empty store; every mutation rewrites the whole file.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

GLOBAL_CONFIG_FILENAME: str = ".yo-rc-global.json"


def user_config_dir() -> Path:
    """Return ``$XDG_CONFIG_HOME`` or ``~/.config``."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def global_config_path() -> Path:
    """Location of the generators' shared global configuration."""
    return Path.home() / GLOBAL_CONFIG_FILENAME


class JsonConfigStore:
    """Flat JSON object persisted at *path*.

    Satisfies :class:`~yocli.core.protocols.ConfigStore` structurally.
    """

    def __init__(self, path: Path) -> None:
        self.path: Path = Path(path)

    def _read(self) -> dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            logger.debug("Cannot read %s: %s", self.path, exc)
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Ignoring malformed config file %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def clear(self) -> None:
        self._write({})

    def all(self) -> dict[str, Any]:
        return self._read()

    def __len__(self) -> int:
        return len(self._read())

    def __repr__(self) -> str:
        return f"JsonConfigStore({str(self.path)!r})"
