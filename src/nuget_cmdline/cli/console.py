"""CLI console helpers with optional Rich support.

Rich is imported lazily so that error reporting keeps working when the
package is installed without it.
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


def rich_available() -> bool:
	return _load_rich_console_class() is not None


class _ConsoleProxy:
	"""``print``-compatible proxy writing to stderr, Rich when available."""

	def print(self, *objects: object, **kwargs: Any) -> None:
		"""Print *objects*; keyword arguments are passed to Rich only."""
		console_class = _load_rich_console_class()
		if console_class is None:
			print(*objects, file=sys.stderr)
			return
		console_class(stderr=True).print(*objects, **kwargs)

	def error(self, message: str, hint: str | None = None) -> None:
		"""Render a user-facing error and its optional hint."""
		if not rich_available():
			print(f"Error: {message}", file=sys.stderr)
			if hint:
				print(f"Hint: {hint}", file=sys.stderr)
			return
		from rich.markup import escape

		self.print(f"[bold red]Error:[/bold red] {escape(message)}")
		if hint:
			self.print(f"[yellow]Hint:[/yellow] {escape(hint)}")


console = _ConsoleProxy()
