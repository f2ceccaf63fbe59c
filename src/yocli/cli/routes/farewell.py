"""Final screen, reached exactly once when the session ends."""

from __future__ import annotations

from yocli.cli.banners import yosay
from yocli.core.router import Router


def handle(router: Router) -> None:
    # May run from any state, including before the first navigation.
    yosay("Bye from us!\nChat soon.")
