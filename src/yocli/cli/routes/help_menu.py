"""Point the user at documentation and the issue tracker."""

from __future__ import annotations

import webbrowser

from yocli.cli import prompts
from yocli.cli.console import out
from yocli.cli.prompts import SEPARATOR
from yocli.core.router import Router

DOCS_URL: str = "https://yeoman.io/learning/"
FAQ_URL: str = "https://yeoman.io/learning/faq.html"
ISSUES_URL: str = "https://github.com/yeoman/yo/issues"

HELP_CHOICES = (
    ("Take me to the documentation", DOCS_URL),
    ("View Frequently Asked Questions", FAQ_URL),
    ("File an issue on GitHub", ISSUES_URL),
    SEPARATOR,
    ("Take me back home, Yo!", "home"),
)


def handle(router: Router) -> None:
    router.insight.track("yoyo", "help")

    where_to = prompts.select(
        "Here are a few helpful resources.\n"
        "I will open the link you select in your browser for you",
        HELP_CHOICES,
    )
    if where_to is None or where_to == "home":
        out.print("I get it, you like learning on your own. I respect that.")
    else:
        webbrowser.open(where_to)
    router.navigate("home")
