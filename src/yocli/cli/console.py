"""CLI console helpers with optional Rich support.

This module avoids module-level imports of optional UI dependencies so
bootstrap paths (``--help``, ``--version``, ``--generators``) keep
working even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from yocli.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console bound to the current stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, highlight=False)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with plain-text fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except MissingDependencyError:
			stream = sys.stderr if self._stderr else sys.stdout
			print(*objects, file=stream)
			return
		rich_console.print(*objects)


console = _ConsoleProxy(stderr=True)
"""Diagnostics, banners and errors."""

out = _ConsoleProxy(stderr=False)
"""Interactive screen content."""
