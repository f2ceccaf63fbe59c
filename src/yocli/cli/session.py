"""Interactive session lifecycle.

:func:`interactive_session` builds the router, registers every route and
guarantees that the ``exit`` route runs exactly once when the session
ends, however it ends: normal return, ``sys.exit``, an exception from a
handler, Ctrl+C, or SIGTERM.
"""

from __future__ import annotations

import logging
import signal
import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from types import FrameType
from typing import Any

from yocli.cli import exit_codes
from yocli.cli.routes import register_routes
from yocli.core.protocols import Analytics, ConfigStore, GeneratorEnvironment, RouteHandler
from yocli.core.router import Router
from yocli.exceptions import RouteNotFoundError

logger = logging.getLogger(__name__)

EXIT_ROUTE: str = "exit"


def _raise_terminated(signum: int, frame: FrameType | None) -> None:
    raise SystemExit(exit_codes.TERMINATED)


def _install_sigterm_handler() -> Any:
    """Turn SIGTERM into ``SystemExit`` so ``finally`` blocks run.

    Returns the previous handler, or ``None`` when signals can't be
    installed from the current thread.
    """
    if threading.current_thread() is not threading.main_thread():
        return None
    return signal.signal(signal.SIGTERM, _raise_terminated)


def navigate_to_exit(router: Router) -> None:
    """Navigate to ``exit``, tolerating embeddings that never registered it."""
    try:
        router.navigate(EXIT_ROUTE)
    except RouteNotFoundError:
        logger.debug("No %r route registered; skipping final navigation", EXIT_ROUTE)


@contextmanager
def interactive_session(
    environment: GeneratorEnvironment,
    insight: Analytics,
    conf: ConfigStore | None = None,
    *,
    routes: Mapping[str, RouteHandler] | None = None,
) -> Iterator[Router]:
    """Yield a router with all routes registered.

    *routes* replaces the default route table, mainly for embedding and
    tests.
    """
    router = Router(environment, insight, conf)
    if routes is None:
        register_routes(router)
    else:
        for name, handler in routes.items():
            router.register_route(name, handler)

    previous = _install_sigterm_handler()
    try:
        yield router
    finally:
        if previous is not None:
            signal.signal(signal.SIGTERM, previous)
        navigate_to_exit(router)


def run_interactive(
    environment: GeneratorEnvironment,
    insight: Analytics,
    conf: ConfigStore | None = None,
) -> None:
    """Start the menu-driven UI at the ``home`` route."""
    with interactive_session(environment, insight, conf) as router:
        router.insight.track("yoyo", "init")
        router.update_available_generators()
        router.navigate("home")
