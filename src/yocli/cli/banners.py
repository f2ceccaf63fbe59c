"""Boxed banners printed around the interactive session.

The mascot speaks through :func:`yosay`; everything is rendered as a
Rich panel, or as plain framed text when Rich is unavailable.
"""

from __future__ import annotations

from yocli.cli.console import console
from yocli.infra.update_check import UpdateInfo

MASCOT: str = "\n".join(
    (
        r"     _-----_     ",
        r"    |       |    ",
        r"    |--(o)--|    ",
        r"   `---------´   ",
        r"    ( _´U`_ )    ",
        r"    /___A___\   /",
        r"     |  ~  |     ",
        r"   __'.___.'__   ",
        r" ´   `  |° ´ Y ` ",
    )
)

ROOT_WARNING: str = (
    "[red]Easy with the `sudo`. Yo is the master around here.[/red]\n\n"
    "Since yo is a user command, there is no need to execute it with root\n"
    "permissions. If you're having permission errors when using yo without sudo,\n"
    "install it for your user instead:\n"
    "[blue]pip install --user yocli[/blue]  or  [blue]pipx install yocli[/blue]"
)

INSIGHT_MESSAGE: str = (
    "[yellow]We're constantly looking for ways to make [bold red]yocli[/bold red] better!\n"
    "May we anonymously report usage statistics to improve the tool over time?[/yellow]"
)


def _panel(body: str, *, border_style: str = "cyan") -> object:
    try:
        from rich.panel import Panel
    except ModuleNotFoundError:
        return body
    return Panel.fit(body, border_style=border_style)


def yosay(message: str) -> None:
    """Print *message* in a speech box next to the mascot."""
    try:
        from rich.columns import Columns
    except ModuleNotFoundError:
        console.print(MASCOT)
        console.print(message)
        return
    console.print(Columns([MASCOT, _panel(message)], padding=(0, 1)))


def print_mascot() -> None:
    console.print(MASCOT)


def update_message(info: UpdateInfo) -> str:
    return (
        f"Update available: [bold green]{info.latest}[/bold green] "
        f"[dim](current: {info.current})[/dim]\n"
        f"Run [magenta]pip install -U {info.package}[/magenta] to update."
    )


def print_update_banner(info: UpdateInfo) -> None:
    yosay(update_message(info))


def print_root_warning() -> None:
    console.print(_panel(ROOT_WARNING, border_style="red"))
