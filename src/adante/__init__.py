"""adante: minimal command-line argument classification.

Tokens are sorted into flags (with an optional value), actions and
errors using vocabularies supplied by the caller.
"""

from adante.cli.handlers import ErrorVocabulary, handle_errors
from adante.core.models import ActionEntry, Arguments, ErrorEntry, FlagEntry
from adante.core.parser import parse, parse_argv
from adante.core.protocols import ErrorVariant, Vocabulary
from adante.core.vocabulary import AliasVocabulary
from adante.exceptions import AdanteError
from adante.version import __version__

__all__: list[str] = [
    "ActionEntry",
    "AdanteError",
    "AliasVocabulary",
    "Arguments",
    "ErrorEntry",
    "ErrorVariant",
    "ErrorVocabulary",
    "FlagEntry",
    "Vocabulary",
    "__version__",
    "handle_errors",
    "parse",
    "parse_argv",
]
