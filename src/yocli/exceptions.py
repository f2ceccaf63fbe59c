"""Custom exception hierarchy for yocli.

Every error condition that reaches the CLI error boundary must be a
subclass of :class:`YoError` so that it can be rendered as a clean
message instead of a stack trace.  Failures raised by route handlers
are the exception: the router lets them propagate untouched.

Hierarchy
---------
YoError
├── RouteNotFoundError
├── EnvironmentFatalError
│   └── GeneratorNotFoundError
├── InstallFailedError
└── MissingDependencyError
"""

from __future__ import annotations


class YoError(Exception):
    """Base exception for all yocli errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Navigation ------------------------------------------------------------

class RouteNotFoundError(YoError):
    """Raised when navigating to a route that was never registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No route registered under the name {name!r}.")
        self.name: str = name


# --- Generator environment ---------------------------------------------------

class EnvironmentFatalError(YoError):
    """Raised when the generator environment cannot discover or run a generator.

    ``code`` is the process exit status the CLI should terminate with.
    """

    def __init__(
        self,
        message: str,
        *,
        code: int = 1,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.code: int = code


class GeneratorNotFoundError(EnvironmentFatalError):
    """Raised when the requested namespace matches no installed generator."""


# --- Package management ------------------------------------------------------

class InstallFailedError(YoError):
    """Raised when ``pip`` exits with a non-zero status."""

    def __init__(
        self,
        message: str,
        *,
        returncode: int,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.returncode: int = returncode


# --- Interaction / tooling ---------------------------------------------------

class MissingDependencyError(YoError):
    """Raised when an optional UI dependency (rich, questionary) is missing."""
