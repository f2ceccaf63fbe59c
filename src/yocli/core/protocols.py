"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and route
handlers must satisfy.  Core code depends ONLY on these protocols —
never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

from yocli.core.models import GeneratorMeta

if TYPE_CHECKING:
    from yocli.core.router import Router


class GeneratorEnvironment(Protocol):
    """Contract for the collaborator that discovers and runs generators."""

    cwd: Any

    def lookup(self, callback: Callable[[], None] | None = None) -> None:
        """Discover generators, then invoke *callback* once discovery is done."""
        ...  # pragma: no cover

    def get_generator_names(self) -> list[str]:
        """Return the unique generator names, one per installed generator."""
        ...  # pragma: no cover

    def get_generators_meta(self) -> Mapping[str, GeneratorMeta]:
        """Return a mapping of namespace → :class:`GeneratorMeta`."""
        ...  # pragma: no cover

    def run(self, args: Sequence[str], options: Mapping[str, Any]) -> None:
        """Run the generator named by ``args[0]``.

        Fatal failures are reported through the ``error`` observers
        registered with :meth:`on`.
        """
        ...  # pragma: no cover

    def on(self, event: str, handler: Callable[[Exception], None]) -> None:
        """Register an observer for *event* (``"error"`` is the only one used)."""
        ...  # pragma: no cover


class Analytics(Protocol):
    """Contract for the fire-and-forget usage tracker."""

    def track(self, *labels: str) -> None:
        ...  # pragma: no cover


class ConfigStore(Protocol):
    """Contract for a persisted flat key/value store."""

    def get(self, key: str, default: Any = None) -> Any:
        ...  # pragma: no cover

    def set(self, key: str, value: Any) -> None:
        ...  # pragma: no cover

    def delete(self, key: str) -> None:
        ...  # pragma: no cover

    def clear(self) -> None:
        ...  # pragma: no cover

    def all(self) -> dict[str, Any]:
        ...  # pragma: no cover

    def __len__(self) -> int:
        ...  # pragma: no cover


class RouteHandler(Protocol):
    """A unit of interactive behaviour invoked with the router as context.

    Handlers may print, prompt, call into the router's collaborators and
    call :meth:`Router.navigate` to chain to another route.  Anything
    they raise propagates to the caller of ``navigate``.
    """

    def __call__(self, router: Router) -> None:
        ...  # pragma: no cover
