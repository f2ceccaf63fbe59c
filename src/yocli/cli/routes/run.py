"""Hand the selected generator over to the generator environment."""

from __future__ import annotations

from yocli.cli.console import out
from yocli.core.router import Router


def handle(router: Router) -> None:
    generator = router.generator
    if generator is None:
        router.navigate("home")
        return

    router.insight.track("yoyo", "run", generator.name)

    shortcut = generator.namespace.removesuffix(":app")
    out.print(
        "\n[yellow]Make sure you are in the directory you want to scaffold into.[/yellow]\n"
        f"[dim]This generator can also be run with:[/dim] [blue]yo {shortcut}[/blue]\n"
    )
    router.environment.run([generator.namespace], {})
