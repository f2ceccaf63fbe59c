"""Core layer — navigation engine, resolution rules and domain models.

Rules
-----
* No ``print()`` calls and no prompts.
* No filesystem, process or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from yocli.core.models import GeneratorInfo, GeneratorMeta
from yocli.core.protocols import Analytics, ConfigStore, GeneratorEnvironment, RouteHandler
from yocli.core.resolver import resolve_default_generator
from yocli.core.router import Router

__all__: list[str] = [
    "Analytics",
    "ConfigStore",
    "GeneratorEnvironment",
    "GeneratorInfo",
    "GeneratorMeta",
    "RouteHandler",
    "Router",
    "resolve_default_generator",
]
