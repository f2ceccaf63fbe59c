"""Route handlers for the interactive session.

Each module exposes ``handle(router)``; :data:`ROUTES` maps the route
names used with :meth:`~yocli.core.router.Router.navigate` to them.
"""

from __future__ import annotations

from yocli.cli.routes import clear_config, farewell, help_menu, home, install, run, update
from yocli.core.protocols import RouteHandler
from yocli.core.router import Router

ROUTES: dict[str, RouteHandler] = {
    "help": help_menu.handle,
    "update": update.handle,
    "run": run.handle,
    "install": install.handle,
    "exit": farewell.handle,
    "clearConfig": clear_config.handle,
    "home": home.handle,
}


def register_routes(router: Router) -> None:
    for name, handler in ROUTES.items():
        router.register_route(name, handler)
