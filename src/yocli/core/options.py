"""Normalisation of CLI options handed to generators."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_CAMEL_BOUNDARY = re.compile(r"[A-Z]")


def legacy_key(key: str) -> str:
    """Return the hyphenated spelling of an option name.

    ``skipInstall`` and ``skip_install`` both become ``skip-install``.
    """
    hyphenated = _CAMEL_BOUNDARY.sub(lambda match: "-" + match.group(0).lower(), key)
    return hyphenated.replace("_", "-")


def add_legacy_aliases(options: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *options* that also exposes hyphenated keys.

    Existing keys are never overwritten by an alias.
    """
    normalised = dict(options)
    for key, value in options.items():
        normalised.setdefault(legacy_key(key), value)
    return normalised


def parse_generator_options(tokens: list[str]) -> tuple[list[str], dict[str, Any]]:
    """Split unrecognised CLI tokens into positionals and options.

    ``--flag`` → ``True``, ``--no-flag`` → ``False``, ``--key=value`` →
    ``"value"``.  Anything not starting with ``-`` is positional.  A lone
    ``--`` makes every following token positional.
    """
    positionals: list[str] = []
    options: dict[str, Any] = {}
    tokens = list(tokens)
    while tokens:
        token = tokens.pop(0)
        if token == "--":
            positionals.extend(tokens)
            break
        if not token.startswith("-") or token == "-":
            positionals.append(token)
            continue

        name = token.lstrip("-")
        if "=" in name:
            name, value = name.split("=", 1)
            options[name] = value
        elif name.startswith("no-"):
            options[name[3:]] = False
        else:
            options[name] = True
    return positionals, options
