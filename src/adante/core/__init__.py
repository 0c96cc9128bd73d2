"""Core layer: the data model, vocabularies, and the token classifier.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be deterministic.
"""

from adante.core.models import ActionEntry, Arguments, Entry, ErrorEntry, FlagEntry
from adante.core.parser import parse, parse_argv
from adante.core.protocols import Classifier, ErrorVariant, Vocabulary
from adante.core.vocabulary import AliasVocabulary

__all__: list[str] = [
    "ActionEntry",
    "AliasVocabulary",
    "Arguments",
    "Classifier",
    "Entry",
    "ErrorEntry",
    "ErrorVariant",
    "FlagEntry",
    "Vocabulary",
    "parse",
    "parse_argv",
]
