"""Entry-point backed generator environment.

Generators are plain Python callables published by installed
distributions under the ``yocli.generators`` entry-point group.  The
entry-point name is the generator namespace::

    [project.entry-points."yocli.generators"]
    webapp = "generator_webapp:app"
    "webapp:controller" = "generator_webapp:controller"

A bare name (``webapp``) is shorthand for ``webapp:app``.  A generator is
called as ``generator(args, options)`` where *args* are the positional
arguments following the namespace.

Fatal failures are never raised directly out of :meth:`run`; they are
emitted to the ``error`` observers registered with :meth:`on`, and only
raised when nobody observes them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from importlib import metadata
from pathlib import Path
from typing import Any

from yocli.core.models import GeneratorMeta
from yocli.exceptions import EnvironmentFatalError, GeneratorNotFoundError, YoError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP: str = "yocli.generators"


def normalize_namespace(name: str) -> str:
    """Return *name* with ``:app`` appended when it has no subgenerator."""
    return name if ":" in name else f"{name}:app"


class EntryPointEnvironment:
    """Discovers and runs generators registered as entry points.

    Satisfies :class:`~yocli.core.protocols.GeneratorEnvironment`
    structurally.
    """

    def __init__(
        self,
        cwd: Path | None = None,
        *,
        group: str = ENTRY_POINT_GROUP,
    ) -> None:
        self.cwd: Path = cwd if cwd is not None else Path.cwd()
        self.group: str = group
        self._meta: dict[str, GeneratorMeta] = {}
        self._entry_points: dict[str, metadata.EntryPoint] = {}
        self._observers: dict[str, list[Callable[[Exception], None]]] = {}

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def on(self, event: str, handler: Callable[[Exception], None]) -> None:
        self._observers.setdefault(event, []).append(handler)

    def emit(self, event: str, payload: Exception) -> None:
        """Deliver *payload* to every observer of *event*.

        An ``error`` event without observers raises *payload*.
        """
        observers = self._observers.get(event, [])
        if not observers and event == "error":
            raise payload
        for handler in list(observers):
            handler(payload)

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def _discover(self) -> list[metadata.EntryPoint]:
        return list(metadata.entry_points(group=self.group))

    def lookup(self, callback: Callable[[], None] | None = None) -> None:
        """Rebuild the namespace table from installed entry points."""
        entry_points: dict[str, metadata.EntryPoint] = {}
        meta: dict[str, GeneratorMeta] = {}

        for entry_point in self._discover():
            namespace = normalize_namespace(entry_point.name)
            if namespace in meta:
                logger.warning(
                    "Generator namespace %s registered twice; keeping %s",
                    namespace,
                    meta[namespace].target,
                )
                continue
            dist = getattr(entry_point, "dist", None)
            meta[namespace] = GeneratorMeta(
                namespace=namespace,
                package=dist.name if dist is not None else None,
                version=dist.version if dist is not None else None,
                target=entry_point.value,
            )
            entry_points[namespace] = entry_point

        self._meta = meta
        self._entry_points = entry_points
        logger.debug("Discovered %d generator namespace(s)", len(meta))

        if callback is not None:
            callback()

    def get_generator_names(self) -> list[str]:
        return sorted({meta.generator_name for meta in self._meta.values()})

    def get_generators_meta(self) -> dict[str, GeneratorMeta]:
        return dict(self._meta)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def _load(self, namespace: str) -> Callable[..., Any]:
        entry_point = self._entry_points[namespace]
        try:
            return entry_point.load()
        except Exception as exc:
            raise EnvironmentFatalError(
                f"Unable to load generator {namespace} ({entry_point.value}): {exc}",
            ) from exc

    def run(self, args: Sequence[str], options: Mapping[str, Any]) -> None:
        """Run the generator named by ``args[0]`` with the remaining args."""
        if not args:
            self.emit(
                "error",
                GeneratorNotFoundError(
                    "Must provide at least one argument, the generator namespace to invoke.",
                ),
            )
            return

        namespace = normalize_namespace(args[0])
        if namespace not in self._entry_points:
            self.emit(
                "error",
                GeneratorNotFoundError(
                    f"You don't seem to have a generator with the name {namespace} installed.",
                    hint="Run `yo --generators` to list what is available, "
                    "or install one with `pip install <package>`.",
                ),
            )
            return

        logger.debug("Running %s with args=%r options=%r", namespace, list(args[1:]), dict(options))
        try:
            generator = self._load(namespace)
            generator(list(args[1:]), dict(options))
        except EnvironmentFatalError as exc:
            self.emit("error", exc)
        except YoError:
            raise
        except Exception as exc:
            fatal = EnvironmentFatalError(
                f"{namespace} failed: {exc}",
                code=_exit_code_of(exc),
            )
            fatal.__cause__ = exc
            self.emit("error", fatal)


def _exit_code_of(exc: BaseException) -> int:
    """Return an integer ``code`` carried by *exc*, defaulting to 1."""
    code = getattr(exc, "code", None)
    if isinstance(code, int) and not isinstance(code, bool) and code != 0:
        return code
    return 1
