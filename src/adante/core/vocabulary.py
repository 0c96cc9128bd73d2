"""Alias-table vocabularies.

:class:`AliasVocabulary` turns a ``{variant: aliases}`` mapping into a
pure classifier, so a vocabulary such as::

    class Flag(Enum):
        HELP = ("-h", "--help")
        VERBOSE = ("-v", "--verbose")

can be handed to :func:`~adante.core.parser.parse` directly.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from typing import Any, Generic, TypeVar

from adante.exceptions import DuplicateAliasError, VocabularyError

V = TypeVar("V")


def _normalise_aliases(variant: object, aliases: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(aliases, str):
        aliases = (aliases,)
    result: list[str] = []
    for alias in aliases:
        if not isinstance(alias, str) or not alias:
            raise VocabularyError(
                f"Invalid alias {alias!r} for {variant!r}.",
                hint="Aliases must be non-empty strings.",
            )
        result.append(alias)
    if not result:
        raise VocabularyError(f"No aliases given for {variant!r}.")
    return tuple(result)


class AliasVocabulary(Generic[V]):
    """Vocabulary backed by an exact-match alias table.

    Parameters
    ----------
    aliases:
        Mapping of each variant to one alias or an iterable of aliases.
    case_sensitive:
        When ``False``, tokens and aliases are compared case-folded.
    """

    def __init__(
        self,
        aliases: Mapping[V, str | Iterable[str]],
        *,
        case_sensitive: bool = True,
    ) -> None:
        self._case_sensitive: bool = case_sensitive
        self._table: dict[str, V] = {}
        self._by_variant: dict[V, tuple[str, ...]] = {}

        for variant, raw in aliases.items():
            if variant is None:
                raise VocabularyError(
                    f"None cannot be a variant (aliases {raw!r}).",
                    hint="None means \"not recognised\"; use another value.",
                )
            names = _normalise_aliases(variant, raw)
            self._by_variant[variant] = names
            for name in names:
                key = self._fold(name)
                existing = self._table.get(key)
                if existing is not None and existing != variant:
                    raise DuplicateAliasError(
                        f"Alias {name!r} maps to both {existing!r} and {variant!r}.",
                    )
                self._table[key] = variant

    @classmethod
    def from_enum(
        cls,
        enum_cls: type[Enum],
        *,
        attribute: str = "aliases",
        case_sensitive: bool = True,
    ) -> AliasVocabulary[Any]:
        """Build a vocabulary from an enum's members.

        Each member's *attribute* supplies its aliases; members without
        that attribute use their value instead.
        """
        table = {
            member: getattr(member, attribute, member.value)
            for member in enum_cls
        }
        return cls(table, case_sensitive=case_sensitive)

    def _fold(self, token: str) -> str:
        return token if self._case_sensitive else token.casefold()

    # ------------------------------------------------------------------
    # Vocabulary protocol
    # ------------------------------------------------------------------

    def classify(self, token: str) -> V | None:
        return self._table.get(self._fold(token))

    __call__ = classify

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def aliases_for(self, variant: V) -> tuple[str, ...]:
        """Return the aliases registered for *variant* (empty if unknown)."""
        return self._by_variant.get(variant, ())

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self._fold(token) in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._by_variant!r})"
