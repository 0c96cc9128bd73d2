"""CLI layer: caller-side error reporting and process exit.

Nothing in here is called by the parser.  Applications use it after
inspecting a parse result.  This package may import from ``core`` and
``utils``, but no other layer may import from ``cli``.
"""

from adante.cli.handlers import (
    ErrorVocabulary,
    describe,
    exit_with_error,
    handle_errors,
    report_error,
)

__all__: list[str] = [
    "ErrorVocabulary",
    "describe",
    "exit_with_error",
    "handle_errors",
    "report_error",
]
