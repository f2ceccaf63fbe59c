"""Delete generators' entries from the global configuration store."""

from __future__ import annotations

from yocli.cli import prompts
from yocli.cli.console import out
from yocli.cli.prompts import SEPARATOR
from yocli.core.models import pretty_generator_name
from yocli.core.router import Router

CLEAR_ALL = "*"
BACK_HOME = "home"


def handle(router: Router) -> None:
    conf = router.conf
    if conf is None or len(conf) == 0:
        router.navigate("home")
        return

    entries = conf.all()
    choices: list[object] = []
    for key in sorted(entries):
        count = len(entries[key]) if isinstance(entries[key], dict) else 0
        noun = "entry" if count == 1 else "entries"
        choices.append((f"{pretty_generator_name(key)} ({count} {noun})", key))
    choices.extend(
        (
            SEPARATOR,
            ("Clear all", CLEAR_ALL),
            ("Take me back home, Yo!", BACK_HOME),
        )
    )

    selected = prompts.select("Which store would you like to clear?", choices)
    if selected is None or selected == BACK_HOME:
        router.navigate("home")
        return

    router.insight.track("yoyo", "clearGlobalConfig")
    if selected == CLEAR_ALL:
        conf.clear()
    else:
        conf.delete(selected)

    out.print("[green]Global config has been successfully cleared.[/green]")
    router.navigate("home")
