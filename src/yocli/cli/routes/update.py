"""Upgrade installed generator packages."""

from __future__ import annotations

from yocli.cli import prompts
from yocli.cli.console import out
from yocli.core.router import Router
from yocli.infra.packages import PackageInstaller


def _installer() -> PackageInstaller:
    return PackageInstaller()


def handle(router: Router) -> None:
    choices = [
        (f"{gen.name} ({gen.version})" if gen.version else gen.name, gen.name)
        for gen in router.generators.values()
    ]
    selected = prompts.checkbox("Generators to update", choices) if choices else []
    if not selected:
        router.navigate("home")
        return

    router.insight.track("yoyo", "update")
    _installer().install(selected, upgrade=True)

    out.print(
        "\n[green]I've just updated your generators. Remember, you can update a specific "
        "generator with:[/green]\n"
        "[blue]pip install -U <package>[/blue]\n"
    )
    router.update_available_generators()
    router.navigate("home")
