"""Stream protocol consumed by the detection core.

The detector, row counter and readers only need two operations on their
input: read the next line and go back to the first one.  The protocol is
``@runtime_checkable`` so callers can optionally verify conformance with
``isinstance`` checks.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineStream(Protocol):
    """Rewindable, line-addressable text source."""

    def next_line(self) -> str | None:
        """Return the next line without its line terminator, or ``None`` at end of stream."""
        ...

    def rewind(self) -> None:
        """Reset the read cursor to the first line."""
        ...
