"""Domain models for adante.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  A parse produces exactly one
:class:`Arguments` value, which the caller owns afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

F = TypeVar("F")
A = TypeVar("A")
E = TypeVar("E")


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagEntry(Generic[F]):
    """A recognised flag, optionally carrying the token that followed it."""

    key: F
    """Variant of the caller's flag vocabulary."""

    value: str | None = None
    """The following token, or ``None`` if nothing was consumed."""


@dataclass(frozen=True, slots=True)
class ActionEntry(Generic[A]):
    """A recognised positional action.  Actions never carry a value."""

    key: A


@dataclass(frozen=True, slots=True)
class ErrorEntry(Generic[E]):
    """A token that could not be classified, or a flag missing its value."""

    error: E


Entry = Union[FlagEntry[Any], ActionEntry[Any], ErrorEntry[Any]]


# ---------------------------------------------------------------------------
# Result collection
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Arguments(Generic[F, A, E]):
    """Immutable, ordered result of a single parse.

    Entries keep the relative order of the tokens they came from; a flag
    and its value collapse into one :class:`FlagEntry`.
    """

    entries: tuple[Entry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return len(self.entries) > 0

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> Entry:
        return self.entries[index]

    # ------------------------------------------------------------------
    # Filtered views
    # ------------------------------------------------------------------

    @property
    def flags(self) -> tuple[FlagEntry[F], ...]:
        return tuple(e for e in self.entries if isinstance(e, FlagEntry))

    @property
    def actions(self) -> tuple[ActionEntry[A], ...]:
        return tuple(e for e in self.entries if isinstance(e, ActionEntry))

    @property
    def errors(self) -> tuple[ErrorEntry[E], ...]:
        return tuple(e for e in self.entries if isinstance(e, ErrorEntry))

    @property
    def has_errors(self) -> bool:
        return any(isinstance(e, ErrorEntry) for e in self.entries)

    @property
    def first_error(self) -> E | None:
        """Error value of the first :class:`ErrorEntry`, if any."""
        for entry in self.entries:
            if isinstance(entry, ErrorEntry):
                return entry.error
        return None

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def has_flag(self, key: F) -> bool:
        return any(flag.key == key for flag in self.flags)

    def has_action(self, key: A) -> bool:
        return any(action.key == key for action in self.actions)

    def value_of(self, key: F, default: str | None = None) -> str | None:
        """Return the value of the first *key* flag.

        Falls back to *default* when the flag is absent or its first
        occurrence consumed no value.  Later occurrences are ignored.
        """
        for flag in self.flags:
            if flag.key == key:
                return flag.value if flag.value is not None else default
        return default
