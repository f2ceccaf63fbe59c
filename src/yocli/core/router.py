"""Navigation engine driving the interactive UI.

The :class:`Router` owns the registry of named routes and the name of
the route last navigated to.  Navigation is the only way to move the
interactive session forward: a handler runs synchronously inside
:meth:`Router.navigate` and may itself call ``navigate`` to chain to the
next screen.  Nothing is queued and nothing is caught — a failing
handler aborts the whole chain.
"""

from __future__ import annotations

import logging

from yocli.core.models import GeneratorInfo, GeneratorMeta, pretty_generator_name
from yocli.core.protocols import Analytics, ConfigStore, GeneratorEnvironment, RouteHandler
from yocli.exceptions import RouteNotFoundError

logger = logging.getLogger(__name__)


class Router:
    """Registry of route handlers plus the current navigation state.

    Parameters
    ----------
    environment:
        Generator environment shared with the rest of the process.  The
        router only borrows it.
    insight:
        Usage tracker handed to route handlers.
    conf:
        Global configuration store, read by the home and clear-config
        screens.  Optional for embeddings that never show those screens.
    """

    def __init__(
        self,
        environment: GeneratorEnvironment,
        insight: Analytics,
        conf: ConfigStore | None = None,
    ) -> None:
        self.environment: GeneratorEnvironment = environment
        self.insight: Analytics = insight
        self.conf: ConfigStore | None = conf
        self.routes: dict[str, RouteHandler] = {}
        self.current_route: str | None = None

        # Session state read by route handlers.
        self.generators: dict[str, GeneratorInfo] = {}
        self.generator: GeneratorInfo | None = None

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def register_route(self, name: str, handler: RouteHandler) -> None:
        """Register *handler* under *name*, replacing any previous one."""
        if name in self.routes:
            logger.debug("Replacing handler for route %r", name)
        self.routes[name] = handler

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def navigate(self, name: str) -> None:
        """Make *name* the current route and run its handler.

        Raises
        ------
        RouteNotFoundError
            When no handler is registered under *name*.  No handler runs
            and :attr:`current_route` is left untouched.
        """
        handler = self.routes.get(name)
        if handler is None:
            raise RouteNotFoundError(name)

        logger.debug("Navigating %s -> %s", self.current_route or "<start>", name)
        self.current_route = name
        handler(self)

    # ------------------------------------------------------------------
    # Generators
    # ------------------------------------------------------------------

    def update_available_generators(self) -> None:
        """Re-run generator discovery and rebuild :attr:`generators`.

        Namespaces are grouped by the package that published them; the
        ``<name>:app`` namespace is preferred as the one to run.
        """
        self.environment.lookup()

        grouped: dict[str, list[GeneratorMeta]] = {}
        for meta in self.environment.get_generators_meta().values():
            key = meta.package or meta.generator_name
            grouped.setdefault(key, []).append(meta)

        generators: dict[str, GeneratorInfo] = {}
        for key in sorted(grouped):
            generators[key] = _build_generator_info(key, grouped[key])

        self.generators = generators
        logger.debug("Available generators: %s", ", ".join(generators) or "<none>")

    def __repr__(self) -> str:
        return f"Router(current_route={self.current_route!r}, routes={sorted(self.routes)!r})"


def _build_generator_info(key: str, metas: list[GeneratorMeta]) -> GeneratorInfo:
    """Collapse every namespace of one package into a :class:`GeneratorInfo`."""
    metas = sorted(metas, key=lambda meta: meta.namespace)
    app = next((meta for meta in metas if meta.subgenerator == "app"), None)
    chosen = app or metas[0]
    return GeneratorInfo(
        name=key,
        version=chosen.version,
        namespace=chosen.namespace,
        app_generator=app is not None,
        pretty_name=pretty_generator_name(chosen.generator_name),
    )
