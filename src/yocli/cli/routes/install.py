"""Find a generator package on the index and install it with pip."""

from __future__ import annotations

import logging

import httpx

from yocli.cli import prompts
from yocli.cli.console import out
from yocli.core.router import Router
from yocli.infra.packages import PackageIndex, PackageInstaller

logger = logging.getLogger(__name__)


def _package_index() -> PackageIndex:
    return PackageIndex()


def _installer() -> PackageInstaller:
    return PackageInstaller()


def handle(router: Router) -> None:
    name = prompts.text("Which generator package would you like to install?")
    if not name:
        router.navigate("home")
        return

    if name in router.generators:
        out.print(f"[yellow]{name} is already installed.[/yellow] Use [bold]Update your generators[/bold] instead.")
        router.navigate("home")
        return

    index = _package_index()
    try:
        package = index.lookup(name)
    except httpx.HTTPError as exc:
        logger.debug("Index lookup for %s failed", name, exc_info=True)
        out.print(f"[red]Could not reach the package index:[/red] {exc}")
        router.navigate("home")
        return
    except ValueError:
        logger.debug("Index returned a malformed answer for %s", name, exc_info=True)
        out.print("[red]The package index sent back a response I could not read.[/red]")
        router.navigate("home")
        return
    finally:
        index.close()

    if package is None:
        out.print(f"[yellow]No package named {name} was found on the index.[/yellow]")
        router.navigate("home")
        return

    out.print(f"\n[bold]{package.name}[/bold] {package.version}\n[dim]{package.summary}[/dim]\n")
    if not prompts.confirm(f"Install {package.name}?"):
        router.navigate("home")
        return

    router.insight.track("yoyo", "install", package.name)
    _installer().install([package.name])
    out.print(f"\n[green]I just installed {package.name}.[/green]\n")

    router.update_available_generators()
    router.navigate("home")
