"""Column-label extraction from a header line.

Three lexical styles are recognised, tried in this order:

1. bracketed lists  -- ``# [ mass ] [ x ] [ y ]``
2. comma lists      -- ``mass,x,y``
3. whitespace lists -- ``#   mass     x     y``

The order matters: a bracketed line that also contains commas must still
be split on brackets.  Comma and whitespace candidates are passed through
:func:`is_sensible_label` because those styles cannot tell labels from
data on their own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from ingestkit_ascii.columns import scan_numeric_fields
from ingestkit_ascii.models import LabelSet
from ingestkit_ascii.strings import isdigit, string_delete
from ingestkit_ascii.tokenizer import iter_tokens

logger = logging.getLogger("ingestkit_ascii")

DEFAULT_LABEL_CAPACITY = 100

# A strategy yields the raw candidate labels, or returns None when it does
# not apply.
LabelStrategy = Callable[[str, str], Iterator[str] | None]


# ---------------------------------------------------------------------------
# Sensibility filter
# ---------------------------------------------------------------------------


def is_sensible_label(text: str) -> bool:
    """Return False if *text* starts with a real number, True otherwise.

    Only the first whitespace- or comma-separated field is read, so
    ``"1.0 2.0"`` and ``"3 mass"`` are rejected while ``"1) mass"`` is
    kept.
    """
    return scan_numeric_fields(text, max_fields=1).count == 0


def count_sensible_labels(candidates: Iterable[str]) -> int:
    """Return how many of *candidates* pass :func:`is_sensible_label`."""
    return sum(1 for candidate in candidates if is_sensible_label(candidate))


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


def _bracketed(line: str, text: str) -> Iterator[str] | None:
    if "]" not in text:
        return None
    return iter_tokens(text, "]")


def _comma_separated(line: str, text: str) -> Iterator[str] | None:
    if line.find(",") <= 0:
        return None
    return (p for p in iter_tokens(text, ",") if is_sensible_label(p))


def _whitespace_separated(line: str, text: str) -> Iterator[str] | None:
    return (p for p in iter_tokens(text, "  ") if is_sensible_label(p))


_STRATEGIES: tuple[LabelStrategy, ...] = (
    _bracketed,
    _comma_separated,
    _whitespace_separated,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def _label_start(line: str) -> int:
    """Offset of the label text: past a leading ``#`` and past the last ``=``."""
    start = 0
    if line.lstrip().startswith("#"):
        start = line.index("#") + 1
    return max(start, line.rfind("=") + 1)


def _clean_label(raw: str) -> str:
    label = raw
    for char in (",", "[", "]"):
        label = string_delete(label, char)
    label = label.strip()

    # leading enumeration: "1) mass", "[01 x ]"
    i = 0
    while i < len(label) and isdigit(label[i]):
        i += 1
    if i and label[i : i + 1] == ")":
        i += 1
    return label[i:].strip()


def get_column_labels(line: str, capacity: int = DEFAULT_LABEL_CAPACITY) -> LabelSet:
    """Extract column labels from a single header line.

    Parameters
    ----------
    line:
        The header line suspected to carry labels.
    capacity:
        Maximum number of labels to materialise.  The returned ``count``
        still reports every label found.

    Returns
    -------
    LabelSet
        Empty (``count == 0``) when no labels could be recovered.
    """
    text = line[_label_start(line):]

    candidates: Iterator[str] = iter(())
    for strategy in _STRATEGIES:
        result = strategy(line, text)
        if result is not None:
            logger.debug("Label strategy %s matched.", strategy.__name__)
            candidates = result
            break

    count = 0
    labels: list[str] = []
    for raw in candidates:
        label = _clean_label(raw)
        if not label:
            continue
        count += 1
        if len(labels) < capacity:
            labels.append(label)

    if count > capacity:
        logger.debug("Found %d labels, keeping %d.", count, capacity)

    return LabelSet(count=count, labels=labels, capacity=capacity)
