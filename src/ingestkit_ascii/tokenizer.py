"""Delimiter splitting with fixed-capacity output.

``split()`` splits on an arbitrary delimiter (single characters such as
``"]"`` or ``","`` as well as multi-character runs such as a double space)
and mirrors a caller-provided buffer: at most ``capacity`` tokens are
materialised while ``total`` still reports how many were found.
``iter_tokens()`` yields the same tokens lazily; the label strategies
consume it so that a long header line is never held as a full token list.
"""

from __future__ import annotations

from collections.abc import Iterator

from ingestkit_ascii.models import SplitResult


def iter_tokens(text: str, delimiter: str) -> Iterator[str]:
    """Yield the tokens of *text* split on *delimiter*.

    Leading spaces are skipped before each token.  The delimiter itself is
    never part of a token.  When no further delimiter is found the rest of
    the string is the final token.

    Raises
    ------
    ValueError
        If *delimiter* is empty.
    """
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")

    offset = 0
    end = len(text)
    while offset < end:
        while offset < end and text[offset] == " ":
            offset += 1
        if offset >= end:
            break

        pos = text.find(delimiter, offset)
        if pos < 0:
            pos = end

        yield text[offset:pos]
        offset = pos + len(delimiter)


def split(text: str, delimiter: str, capacity: int | None = None) -> SplitResult:
    """Split *text* on *delimiter*.

    Parameters
    ----------
    text:
        The string to split.
    delimiter:
        Non-empty delimiter string.
    capacity:
        Maximum number of tokens to materialise.  ``None`` means unbounded.

    Returns
    -------
    SplitResult
        The materialised tokens and the total token count.

    Raises
    ------
    ValueError
        If *delimiter* is empty.
    """
    parts: list[str] = []
    total = 0
    for token in iter_tokens(text, delimiter):
        total += 1
        if capacity is None or len(parts) < capacity:
            parts.append(token)

    return SplitResult(parts=parts, total=total, capacity=capacity)
