"""Concrete :class:`~ingestkit_ascii.protocols.LineStream` implementations."""

from __future__ import annotations

import contextlib
from collections.abc import Iterable, Iterator
from typing import TextIO


class ListLineStream:
    """In-memory line stream over a list of strings."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = [line.rstrip("\r\n") for line in lines]
        self._pos = 0

    @classmethod
    def from_text(cls, text: str) -> ListLineStream:
        return cls(text.splitlines())

    def next_line(self) -> str | None:
        if self._pos >= len(self._lines):
            return None
        line = self._lines[self._pos]
        self._pos += 1
        return line

    def rewind(self) -> None:
        self._pos = 0

    @property
    def position(self) -> int:
        """Number of lines consumed since the last rewind."""
        return self._pos


class TextLineStream:
    """Line stream over a seekable text handle.

    The handle is owned by the caller; :meth:`rewind` seeks back to
    offset 0.
    """

    def __init__(self, handle: TextIO) -> None:
        self._handle = handle
        self._pos = 0

    def next_line(self) -> str | None:
        line = self._handle.readline()
        if not line:
            return None
        self._pos += 1
        return line.rstrip("\r\n")

    def rewind(self) -> None:
        self._handle.seek(0)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos


@contextlib.contextmanager
def open_line_stream(
    path: str,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> Iterator[TextLineStream]:
    """Open *path* as a :class:`TextLineStream`.

    ``OSError`` from ``open()`` propagates unchanged.
    """
    with open(path, "r", encoding=encoding, errors=errors, newline="") as fh:
        yield TextLineStream(fh)
