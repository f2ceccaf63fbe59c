"""Project-local configuration (``.yo-rc.json``).

A missing, unreadable or malformed file is not an error: it simply
means the project has no recorded generator.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from yocli.core.resolver import resolve_default_generator

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILENAME: str = ".yo-rc.json"


def load_project_config(cwd: Path | str) -> dict[str, Any] | None:
    """Return the parsed ``.yo-rc.json`` in *cwd*, or ``None``."""
    path = Path(cwd) / PROJECT_CONFIG_FILENAME
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.debug("Ignoring unusable %s: %s", path, exc)
        return None

    if not isinstance(data, dict):
        logger.debug("Ignoring %s: top level is not an object", path)
        return None
    return data


def set_default_generator(cwd: Path | str, args: Sequence[str]) -> list[str]:
    """Rewrite *args* using the generator recorded in *cwd*'s project config."""
    return resolve_default_generator(load_project_config(cwd), args)
