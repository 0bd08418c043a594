"""Normalized error codes and structured error model for ingestkit-ascii.

``ErrorCode`` contains every error/warning code the sniffer can report.
``IngestError`` carries the code together with a ``line_number`` giving
the 1-based line of the file the diagnostic refers to, when known.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Error codes for ASCII table sniffing.

    Values equal their names so they are stable strings suitable for
    metrics and alerting.  ``E_`` prefix = fatal, ``W_`` prefix = warning.
    """

    # Parse
    E_PARSE_CORRUPT = "E_PARSE_CORRUPT"
    E_PARSE_EMPTY = "E_PARSE_EMPTY"

    # Security
    E_SECURITY_TOO_LARGE = "E_SECURITY_TOO_LARGE"
    E_SECURITY_BINARY = "E_SECURITY_BINARY"

    # Detection
    E_DETECT_NO_COLUMNS = "E_DETECT_NO_COLUMNS"

    # Warnings (non-fatal)
    W_LARGE_FILE = "W_LARGE_FILE"
    W_NAN_IN_FILE = "W_NAN_IN_FILE"
    W_INF_IN_FILE = "W_INF_IN_FILE"
    W_TOO_MANY_COLUMNS = "W_TOO_MANY_COLUMNS"
    W_HEADER_LIMIT_REACHED = "W_HEADER_LIMIT_REACHED"
    W_NO_LABELS = "W_NO_LABELS"
    W_LABELS_TRUNCATED = "W_LABELS_TRUNCATED"
    W_LINES_TRUNCATED = "W_LINES_TRUNCATED"


class IngestError(BaseModel):
    """Structured error with code, message, and context.

    ``stage`` names the step that produced the diagnostic (``"security"``,
    ``"detect"``, ``"labels"``, ``"rows"``).  Warnings are always
    ``recoverable``.
    """

    code: ErrorCode
    message: str
    stage: str | None = None
    recoverable: bool = False
    line_number: int | None = None
