"""Infrastructure layer — entry points, files, processes and the network.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering, no prompts).
"""

from yocli.infra.config_store import JsonConfigStore
from yocli.infra.environment import EntryPointEnvironment
from yocli.infra.insight import Insight
from yocli.infra.project_config import load_project_config, set_default_generator

__all__: list[str] = [
    "EntryPointEnvironment",
    "Insight",
    "JsonConfigStore",
    "load_project_config",
    "set_default_generator",
]
