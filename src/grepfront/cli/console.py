"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, the
not-implemented notice) keep working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any


def _load_rich_console_class() -> type[Any] | None:
	"""Return ``rich.console.Console`` or ``None`` when Rich is missing."""
	try:
		from rich.console import Console
	except ModuleNotFoundError:
		return None
	return Console


def get_rich_console() -> Any | None:
	"""Create a Rich console instance targeting stderr, if Rich is available."""
	console_class = _load_rich_console_class()
	if console_class is None:
		return None
	return console_class(stderr=True, highlight=False)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy writing to stderr."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		rich_console = get_rich_console()
		if rich_console is None:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
