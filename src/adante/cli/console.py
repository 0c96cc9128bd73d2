"""Console helpers with optional Rich support.

Rich is imported lazily so error reporting keeps working, as plain
stderr output, when it is not installed.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

from adante.exceptions import OptionalDependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``OptionalDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise OptionalDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def _load_rich_escape() -> Callable[[str], str]:
	"""Return ``rich.markup.escape`` or raise ``OptionalDependencyError``."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError as exc:
		raise OptionalDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return escape


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Writes ``<label> <text>`` lines for the error handlers.

	The label is styled when Rich is importable.  Neither part is ever
	read as markup, so user tokens like ``[bold]`` print verbatim.
	"""

	def line(self, label: str, text: str, *, style: str) -> None:
		try:
			rich_console = get_rich_console()
			escape = _load_rich_escape()
		except OptionalDependencyError:
			print(f"{label} {text}", file=sys.stderr)
			return
		rich_console.print(f"[{style}]{escape(label)}[/{style}] {escape(text)}")


console = _ConsoleProxy()
