"""Small string helpers used around the sniffer.

Label text ends up in plot legends and output filenames, so this module
carries the conversions needed for that: ASCII case folding, substring
replacement and deletion, filesystem-safe names, legend escaping and
NUL-terminated strings for C callers.
"""

from __future__ import annotations

import string
from collections.abc import Sequence

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

# Characters dropped from safe filenames.
_UNSAFE_CHARS = "{}()[]<>*?^'\"&#|"


def ucase(text: str) -> str:
    """Upper-case ASCII letters only."""
    return text.translate(_TO_UPPER)


def lcase(text: str) -> str:
    """Lower-case ASCII letters only."""
    return text.translate(_TO_LOWER)


def isdigit(char: str) -> bool:
    """True if *char* is a single ASCII digit."""
    return len(char) == 1 and "0" <= char <= "9"


def string_replace(text: str, key: str, replacement: str) -> str:
    """Replace every occurrence of *key*; replacements are not rescanned."""
    if not key:
        return text
    return text.replace(key, replacement)


def string_delete(text: str, key: str) -> str:
    """Delete *key* until no occurrence is left.

    Deletion repeats, so removing ``"ab"`` from ``"aabb"`` gives ``""``.
    """
    if not key:
        return text
    while key in text:
        text = text.replace(key, "")
    return text


def string_sub(text: str, start: int, end: int, replacement: str) -> str:
    """Replace the 1-based inclusive range ``start..end`` with *replacement*."""
    return text[: start - 1] + replacement + text[end:]


def safename(text: str) -> str:
    """Turn *text* into something usable as a filename.

    Slashes and spaces become underscores, brackets and shell operators
    are removed, and backslash escapes (the backslash plus the character
    after it) are dropped.
    """
    name = text.strip().replace("/", "_").replace(" ", "_")
    for char in _UNSAFE_CHARS:
        name = name.replace(char, "")

    out: list[str] = []
    i = 0
    while i < len(name):
        if name[i] == "\\":
            i += 2
            continue
        out.append(name[i])
        i += 1
    return "".join(out)


def add_escape_chars(text: str) -> str:
    """Escape ``_`` and ``^`` so that labels render literally in legends."""
    return text.replace("_", "\\_").replace("^", "\\^")


def basename(path: str) -> str:
    """Strip the directory part of *path*.

    A slash in the final position is kept, so ``"dir/"`` is returned
    unchanged.
    """
    path = path.rstrip()
    pos = path.rfind("/", 0, max(len(path) - 1, 0))
    return path[pos + 1 :]


def cstring(text: str) -> str:
    """Return *text* with trailing blanks removed and a NUL terminator."""
    return text.rstrip() + "\0"


def fstring(chars: str | bytes) -> str:
    """Convert a NUL-terminated buffer back to a plain string."""
    if isinstance(chars, bytes):
        chars = chars.decode("ascii", errors="replace")
    return chars.split("\0", 1)[0]


def enumerate_choice(
    index: int, choices: Sequence[str], default: int | None = None
) -> str:
    """Return ``choices[index]`` using 1-based *index*.

    Falls back to the 1-based *default* when *index* is out of range, and
    to ``""`` when neither is valid.
    """
    if 1 <= index <= len(choices):
        return choices[index - 1].strip()
    if default is not None and 1 <= default <= len(choices):
        return choices[default - 1].strip()
    return ""
