"""Process-wide logging setup.

``--debug`` turns on DEBUG records from every ``yocli.*`` logger,
rendered by Rich when it is installed.  Otherwise only warnings are
shown.
"""

from __future__ import annotations

import logging

LOG_FORMAT: str = "%(name)s: %(message)s"


def configure_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    root = logging.getLogger("yocli")
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
    else:
        from yocli.cli.console import get_rich_console

        handler = RichHandler(
            console=get_rich_console(stderr=True),
            show_time=debug,
            show_path=False,
            markup=False,
        )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
