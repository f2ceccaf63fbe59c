"""Home screen: the main menu of the interactive session."""

from __future__ import annotations

from typing import Any

from yocli.cli import prompts
from yocli.cli.prompts import SEPARATOR
from yocli.core.router import Router


def _menu(router: Router) -> list[Any]:
    choices: list[Any] = []

    generators = sorted(router.generators.values(), key=lambda gen: gen.pretty_name.lower())
    if generators:
        choices.append(SEPARATOR)
        for generator in generators:
            title = f"Run the {generator.pretty_name} generator"
            if generator.version:
                title += f" ({generator.version})"
            choices.append((title, ("run", generator.name)))
        choices.append(SEPARATOR)
        choices.append(("Update your generators", ("update", None)))
        choices.append(SEPARATOR)

    choices.append(("Install a generator", ("install", None)))
    choices.append(("Find some help", ("help", None)))
    if router.conf is not None and len(router.conf) > 0:
        choices.append(("Clear global config", ("clearConfig", None)))
    choices.append(("Get me out of here!", ("exit", None)))
    return choices


def handle(router: Router) -> None:
    router.insight.track("yoyo", "home")

    answer = prompts.select("'Allo! What would you like to do?", _menu(router))
    if answer is None:
        return

    method, generator_name = answer
    if method == "exit":
        # The session finalizer navigates to ``exit``.
        return
    if method == "run":
        router.generator = router.generators[generator_name]
    router.navigate(method)
