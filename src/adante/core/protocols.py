"""Protocols (interfaces) consumed by the core layer.

Callers plug their own flag, action and error vocabularies into the
parser through these contracts.  Any object with the right shape
satisfies them structurally; no explicit inheritance is required.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeVar, runtime_checkable

V = TypeVar("V")
V_co = TypeVar("V_co", covariant=True)

Classifier = Callable[[str], V | None]
"""A plain function mapping a token to a variant, or ``None``."""


@runtime_checkable
class Vocabulary(Protocol[V_co]):
    """Contract for flag and action vocabularies.

    The caller defines an arbitrary set of variants (usually an
    :class:`enum.Enum`) and the string-matching rules, including any
    number of aliases per variant.
    """

    def classify(self, token: str) -> V_co | None:
        """Return the variant for *token*, or ``None`` if unrecognised.

        Must be a pure function: the same token always yields the same
        answer.
        """
        ...  # pragma: no cover


@runtime_checkable
class ErrorVariant(Protocol):
    """Contract for the caller's error vocabulary.

    :meth:`handle` is invoked by the caller after inspecting the parse
    result, never by the parser itself.
    """

    @property
    def description(self) -> str:
        """Human-readable message for this error."""
        ...  # pragma: no cover

    def handle(self) -> None:
        """Perform the caller-defined reaction (e.g. print and exit)."""
        ...  # pragma: no cover
