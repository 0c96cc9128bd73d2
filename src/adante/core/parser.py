"""Token classifier: the single left-to-right scan.

Each token is tried against the flag vocabulary, then the action
vocabulary; anything else becomes an :class:`ErrorEntry`.  A flag takes
the next token as its value only when that token exists **and** fails
both vocabularies, so flags are zero-or-one arity depending on what
follows them:

    ["-p", "file.txt"]  ->  FlagEntry(PRINT, "file.txt")
    ["-v", "add"]       ->  FlagEntry(VERBOSE), ActionEntry(ADD)

Guarantees
----------
* Pure: no I/O, no ``print()``, no mutation of the inputs.
* Total: malformed tokens never raise, they become error entries.
* Order preserving: entries follow the token order exactly.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

from adante.core.models import ActionEntry, Arguments, Entry, ErrorEntry, FlagEntry
from adante.core.protocols import Classifier, Vocabulary
from adante.exceptions import InvalidTokensError, VocabularyError
from adante.utils.log import get_logger

F = TypeVar("F")
A = TypeVar("A")
E = TypeVar("E")

logger = get_logger(__name__)

_MISSING: Any = object()


# ---------------------------------------------------------------------------
# Input normalisation
# ---------------------------------------------------------------------------

def _as_classifier(candidate: Any, role: str) -> Callable[[str], Any]:
    """Accept a :class:`Vocabulary` object or a plain callable."""
    classify = getattr(candidate, "classify", None)
    if callable(classify):
        return classify
    if callable(candidate):
        return candidate
    raise VocabularyError(
        f"The {role} classifier must be callable or provide classify(), "
        f"got {type(candidate).__name__}.",
    )


def _as_tokens(tokens: Iterable[str]) -> tuple[str, ...]:
    if isinstance(tokens, (str, bytes)):
        raise InvalidTokensError(
            "Expected a sequence of tokens, got a single string.",
            hint="Wrap it in a list, or split it first.",
        )
    try:
        result = tuple(tokens)
    except TypeError as exc:
        raise InvalidTokensError(
            f"Tokens must be iterable, got {type(tokens).__name__}.",
        ) from exc
    for index, token in enumerate(result):
        if not isinstance(token, str):
            raise InvalidTokensError(
                f"Token at index {index} is {type(token).__name__}, not str.",
            )
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse(
    tokens: Iterable[str],
    flag_classifier: Classifier[F] | Vocabulary[F],
    action_classifier: Classifier[A] | Vocabulary[A],
    error_value: E,
    *,
    requires_value: Callable[[F], bool] | None = None,
    missing_value_error: Any = _MISSING,
) -> Arguments[F, A, E]:
    """Classify *tokens* into flag, action and error entries.

    Parameters
    ----------
    tokens:
        Raw argument tokens, program name already removed.
    flag_classifier, action_classifier:
        A :class:`~adante.core.protocols.Vocabulary` or a callable
        ``str -> variant | None``.
    error_value:
        Stored in an :class:`ErrorEntry` for each token that matches
        neither vocabulary.
    requires_value:
        Optional predicate marking flags whose value is mandatory.  Such
        a flag with no consumable value is replaced by an error entry.
    missing_value_error:
        Error stored for a mandatory value that is missing.  Defaults to
        *error_value*.

    Raises
    ------
    InvalidTokensError
        If *tokens* is a bare string or holds non-string items.
    VocabularyError
        If a classifier is neither callable nor a vocabulary.
    """
    items = _as_tokens(tokens)
    classify_flag = _as_classifier(flag_classifier, "flag")
    classify_action = _as_classifier(action_classifier, "action")
    if missing_value_error is _MISSING:
        missing_value_error = error_value

    def is_value(token: str) -> bool:
        return classify_flag(token) is None and classify_action(token) is None

    logger.debug("parse_started", tokens=len(items))

    entries: list[Entry] = []
    total = len(items)
    cursor = 0
    while cursor < total:
        token = items[cursor]

        flag = classify_flag(token)
        if flag is not None:
            following = cursor + 1
            if following < total and is_value(items[following]):
                entries.append(FlagEntry(flag, items[following]))
                logger.debug("token_classified", index=cursor, kind="flag", value=True)
                cursor += 2
                continue
            if requires_value is not None and requires_value(flag):
                entries.append(ErrorEntry(missing_value_error))
                logger.debug("flag_value_missing", index=cursor, flag=repr(flag))
            else:
                entries.append(FlagEntry(flag))
                logger.debug("token_classified", index=cursor, kind="flag", value=False)
            cursor += 1
            continue

        action = classify_action(token)
        if action is not None:
            entries.append(ActionEntry(action))
            logger.debug("token_classified", index=cursor, kind="action")
        else:
            entries.append(ErrorEntry(error_value))
            logger.debug("token_classified", index=cursor, kind="error")
        cursor += 1

    result: Arguments[F, A, E] = Arguments(tuple(entries))
    logger.debug("parse_finished", entries=len(result), errors=len(result.errors))
    return result


def parse_argv(
    flag_classifier: Any,
    action_classifier: Any,
    error_value: E,
    argv: Sequence[str] | None = None,
    **policy: Any,
) -> Arguments[Any, Any, E]:
    """Parse *argv*, defaulting to ``sys.argv[1:]``.

    Keyword arguments in *policy* are forwarded to :func:`parse`.
    """
    if argv is None:
        argv = sys.argv[1:]
    return parse(argv, flag_classifier, action_classifier, error_value, **policy)
