"""Default-generator resolution for direct (non-interactive) runs.

When a project was generated by exactly one generator, its
``.yo-rc.json`` records that generator under a ``generator-<name>`` key.
In that case ``yo <sub> ...`` is shorthand for ``yo <name>:<sub> ...``.

This module only holds the pure rewrite; loading the file is done by
:mod:`yocli.infra.project_config`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

logger = logging.getLogger(__name__)

GENERATOR_KEY_PREFIX: str = "generator-"


def configured_generators(config: Mapping[str, Any]) -> list[str]:
    """Return generator identities recorded in *config*, in key order.

    A key names a generator iff it starts with ``generator-``; the
    identity is the key with that prefix removed once.
    """
    return [
        key[len(GENERATOR_KEY_PREFIX):]
        for key in config
        if isinstance(key, str) and key.startswith(GENERATOR_KEY_PREFIX)
    ]


def resolve_default_generator(
    config: Mapping[str, Any] | None,
    args: Sequence[str],
) -> list[str]:
    """Prefix the first argument with the project's only generator.

    Parameters
    ----------
    config:
        Parsed project configuration, or ``None`` when the project has
        none.
    args:
        Raw positional CLI arguments.  Never mutated.

    Returns
    -------
    list[str]
        ``["<id>:<args[0]>", *args[1:]]`` when *config* names exactly one
        generator, ``["<id>"]`` when it does and *args* is empty, and a
        copy of *args* otherwise.
    """
    if config is None:
        return list(args)

    generators = configured_generators(config)
    if len(generators) != 1:
        if generators:
            logger.debug(
                "Several generators configured (%s); not choosing a default",
                ", ".join(generators),
            )
        return list(args)

    identity = generators[0]
    if not args:
        return [identity]
    return [f"{identity}:{args[0]}", *args[1:]]
