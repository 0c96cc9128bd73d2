"""Caller-side error handling for parse results.

The parser only *reports* problems as :class:`~adante.core.models.ErrorEntry`
values.  Reacting to them (printing a message, terminating the process)
happens here, when the application chooses to call these helpers.

Typical use::

    class Problem(ErrorVocabulary):
        SYNTAX = "Improper syntax usage"
        NOT_RECOGNIZED = "Action or flag is not recognized"

    args = parse(sys.argv[1:], flags, actions, Problem.NOT_RECOGNIZED)
    handle_errors(args)
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from enum import Enum
from typing import Any, NoReturn

from adante.cli import exit_codes
from adante.cli.console import console
from adante.core.models import Arguments
from adante.utils.log import get_logger

logger = get_logger(__name__)


def describe(error: Any) -> str:
    """Return the human-readable message for *error*."""
    description = getattr(error, "description", None)
    if isinstance(description, str):
        return description
    return str(error)


def report_error(error: Any, *, hint: str | None = None) -> None:
    """Print ``Error: <description>`` (and an optional hint) to stderr."""
    message = describe(error)
    console.line("Error:", message, style="bold red")
    if hint:
        console.line("Hint:", hint, style="yellow")


def exit_with_error(error: Any, *, code: int = exit_codes.GENERAL_ERROR) -> NoReturn:
    """Report *error* and terminate the process with *code*."""
    report_error(error)
    sys.exit(code)


class ErrorVocabulary(Enum):
    """Base class for caller-defined error vocabularies.

    Each member's value is its description.  The default :meth:`handle`
    reports the description and exits with
    :data:`~adante.cli.exit_codes.GENERAL_ERROR`; override it for other
    behaviour.  Members with equal descriptions become enum aliases, so
    keep descriptions distinct.
    """

    @property
    def description(self) -> str:
        return str(self.value)

    def handle(self) -> None:
        exit_with_error(self)


def _default_handler(error: Any) -> None:
    handle = getattr(error, "handle", None)
    if callable(handle):
        handle()
    else:
        exit_with_error(error)


def handle_errors(
    arguments: Arguments[Any, Any, Any],
    handler: Callable[[Any], None] | None = None,
) -> int:
    """Invoke *handler* for every error entry of *arguments*, in order.

    Without *handler*, each error's own ``handle()`` is used, falling
    back to :func:`exit_with_error`.

    Returns
    -------
    int
        :data:`~adante.cli.exit_codes.SUCCESS` when there were no errors,
        else :data:`~adante.cli.exit_codes.GENERAL_ERROR` (reached only
        if the handlers return).
    """
    errors = arguments.errors
    if not errors:
        return exit_codes.SUCCESS

    dispatch = handler if handler is not None else _default_handler
    for entry in errors:
        logger.info("error_handled", error=describe(entry.error))
        dispatch(entry.error)
    return exit_codes.GENERAL_ERROR
