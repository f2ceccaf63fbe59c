"""yocli — interactive front-end for scaffolding generators.

Runs a named generator directly, or walks the user through an
interactive menu for running, installing and updating generators.
"""

from yocli.version import __version__

__all__: list[str] = ["__version__"]
