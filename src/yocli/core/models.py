"""Domain models for yocli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and trivial derivations.
"""

from __future__ import annotations

from dataclasses import dataclass

_PACKAGE_PREFIXES: tuple[str, ...] = ("yocli-generator-", "generator-")


# ---------------------------------------------------------------------------
# Environment-level metadata
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GeneratorMeta:
    """One namespace registered with the generator environment."""

    namespace: str
    """Fully qualified namespace, e.g. ``webapp:app``."""

    package: str | None
    """Distribution that published the generator, when known."""

    version: str | None
    """Version of :attr:`package`, when known."""

    target: str
    """Entry point value (``module:attr``) used to load the generator."""

    @property
    def generator_name(self) -> str:
        """Namespace portion before the first ``:``."""
        return self.namespace.split(":", 1)[0]

    @property
    def subgenerator(self) -> str:
        """Namespace portion after the first ``:`` (``app`` by default)."""
        _, _, sub = self.namespace.partition(":")
        return sub or "app"


# ---------------------------------------------------------------------------
# Router-level view of an installed generator package
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GeneratorInfo:
    """An installed generator package as presented on the home screen."""

    name: str
    """Package name (or bare generator name when no package is known)."""

    version: str | None
    namespace: str
    """Namespace launched when the user picks this generator."""

    app_generator: bool
    """Whether the package provides an ``<name>:app`` namespace."""

    pretty_name: str


def pretty_generator_name(name: str) -> str:
    """Turn ``generator-web-app`` into ``Web App``."""
    for prefix in _PACKAGE_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix):]
            break
    return " ".join(part.capitalize() for part in name.replace("_", "-").split("-") if part)
