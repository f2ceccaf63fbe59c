"""Thin questionary wrappers used by the interactive routes.

Every helper imports questionary lazily and returns ``None`` (or an
empty list) when the user cancels with Ctrl+C / Esc, leaving the caller
to decide where to navigate next.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from yocli.exceptions import MissingDependencyError

SEPARATOR: object = object()
"""Marker placed in a choice list to draw a separator line."""


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _build_choices(questionary: Any, choices: Sequence[Any]) -> list[Any]:
    built: list[Any] = []
    for choice in choices:
        if choice is SEPARATOR:
            built.append(questionary.Separator())
        else:
            title, value = choice
            built.append(questionary.Choice(title=title, value=value))
    return built


def select(message: str, choices: Sequence[Any]) -> Any:
    """Single choice among ``(title, value)`` pairs and :data:`SEPARATOR`."""
    questionary = _import_questionary()
    return questionary.select(
        message,
        choices=_build_choices(questionary, choices),
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()


def checkbox(message: str, choices: Sequence[Any]) -> list[Any]:
    """Multiple choice; an empty list when cancelled or nothing is ticked."""
    questionary = _import_questionary()
    answer = questionary.checkbox(message, choices=_build_choices(questionary, choices)).ask()
    return list(answer or [])


def text(message: str) -> str | None:
    questionary = _import_questionary()
    answer = questionary.text(message).ask()
    return answer.strip() if isinstance(answer, str) else None


def confirm(message: str, *, default: bool = True) -> bool:
    """Yes/no question; a cancelled prompt counts as "no"."""
    questionary = _import_questionary()
    return bool(questionary.confirm(message, default=default).ask())
