"""Custom exception hierarchy for adante.

Malformed *argument tokens* never raise: they are reported as
:class:`~adante.core.models.ErrorEntry` values in the parse result.
The exceptions below signal **programming errors** at the library
boundary, such as a vocabulary that breaks its contract.

Hierarchy
---------
AdanteError
├── InvalidTokensError
├── VocabularyError
│   └── DuplicateAliasError
└── OptionalDependencyError
"""

from __future__ import annotations


class AdanteError(Exception):
    """Base exception for all adante errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class InvalidTokensError(AdanteError):
    """Raised when the token input is not an iterable of strings."""


# --- Vocabularies ----------------------------------------------------------

class VocabularyError(AdanteError):
    """Raised when a classifier or vocabulary violates its contract."""


class DuplicateAliasError(VocabularyError):
    """Raised when one alias is mapped to two different variants."""


# --- Environment -----------------------------------------------------------

class OptionalDependencyError(AdanteError):
    """Raised when an optional UI dependency is not installed."""
