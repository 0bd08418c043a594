"""Numeric column counting, header detection and row counting.

The detector never relies on comment markers: header lines in scientific
data files are not reliably tagged.  Instead it scans from the top of the
stream until two consecutive non-blank lines report the same positive
number of leading numeric fields.  Everything above those two lines is
header, and the repeated count is the number of data columns.
"""

from __future__ import annotations

import logging
import re

from ingestkit_ascii.models import ColumnCountResult, LineScan
from ingestkit_ascii.protocols import LineStream

logger = logging.getLogger("ingestkit_ascii")

DEFAULT_MAX_HEADER_LINES = 1000
DEFAULT_MAX_COLUMNS = 1000

# Initial "previous count"; no line can ever report it.
_NO_PREVIOUS_COUNT = -100
_BLANK_LINE_COUNT = -1

_REAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eEdD][+-]?\d+)?")
_SPECIAL_RE = re.compile(r"[+-]?(?:nan|inf(?:inity)?)", re.IGNORECASE)
_FIELD_SEP_RE = re.compile(r"\s*,\s*|\s+")


# ---------------------------------------------------------------------------
# Field parsing
# ---------------------------------------------------------------------------


def parse_real(token: str) -> float | None:
    """Parse one field as a real number.

    Accepts integers, decimals and exponents (including the ``d``/``D``
    exponent written by Fortran programs), plus NaN and infinities in any
    case.  Returns ``None`` when the field is not a number.
    """
    token = token.strip()
    if _REAL_RE.fullmatch(token):
        return float(token.replace("d", "e").replace("D", "e"))
    if _SPECIAL_RE.fullmatch(token):
        return float(token)
    return None


def scan_numeric_fields(line: str, max_fields: int = DEFAULT_MAX_COLUMNS) -> LineScan:
    """Parse the leading numeric fields of *line*.

    Fields are separated by whitespace or by a single comma.  Scanning
    stops at the first field that is not a number (an empty field between
    two commas included) or once *max_fields* values have been read.
    """
    stripped = line.strip()
    if not stripped:
        return LineScan()

    fields = _FIELD_SEP_RE.split(stripped)
    values: list[float] = []
    for index, field in enumerate(fields):
        if len(values) >= max_fields:
            return LineScan(
                values=values,
                stop_index=index,
                field_count=len(fields),
                truncated=True,
            )
        value = parse_real(field)
        if value is None:
            return LineScan(values=values, stop_index=index, field_count=len(fields))
        values.append(value)

    return LineScan(values=values, stop_index=len(fields), field_count=len(fields))


def count_numeric_columns(line: str, max_columns: int = DEFAULT_MAX_COLUMNS) -> int:
    """Return the number of leading fields of *line* that parse as reals.

    A NaN field counts as present.  Blank lines give 0.  The count is
    clamped to *max_columns*.
    """
    scan = scan_numeric_fields(line, max_fields=max_columns)
    if scan.truncated:
        logger.warning("Too many columns on line: count clamped to %d.", max_columns)
    return scan.count


# ---------------------------------------------------------------------------
# Header / column-count detection
# ---------------------------------------------------------------------------


def detect_columns(
    stream: LineStream,
    max_header_lines: int = DEFAULT_MAX_HEADER_LINES,
    max_columns: int = DEFAULT_MAX_COLUMNS,
    log_sample_data: bool = False,
) -> ColumnCountResult:
    """Determine the number of header lines and numeric columns of a stream.

    The stream must be positioned at its start.  It is always rewound
    before returning, whatever the outcome.

    Parameters
    ----------
    stream:
        The line stream to scan.
    max_header_lines:
        Scanning stops once more than this many lines have been read.
    max_columns:
        Per-line limit on the number of numeric fields counted.
    log_sample_data:
        Include the text of scanned lines in debug log records.

    Returns
    -------
    ColumnCountResult
        ``column_count`` is 0 when the count never stabilised.
    """
    prev_count = _NO_PREVIOUS_COUNT
    this_count = 0
    column_count = 0
    last_blank = True
    lines_scanned = 0
    saw_nan = False
    saw_inf = False
    too_many_columns = False
    stabilized = False
    hit_limit = False

    try:
        while True:
            if not last_blank and this_count == prev_count and column_count > 0:
                stabilized = True
                break
            if lines_scanned > max_header_lines:
                hit_limit = True
                break

            prev_count = column_count
            line = stream.next_line()
            if line is None:
                break
            lines_scanned += 1

            if "NaN" in line:
                saw_nan = True
            if "Inf" in line:
                saw_inf = True

            last_blank = not line.strip()
            if last_blank:
                this_count = _BLANK_LINE_COUNT
            else:
                scan = scan_numeric_fields(line, max_fields=max_columns)
                if scan.truncated:
                    too_many_columns = True
                this_count = scan.count
                column_count = this_count

            if log_sample_data:
                logger.debug(
                    "Header scan line %d: ncols=%d %r", lines_scanned, this_count, line
                )
            else:
                logger.debug("Header scan line %d: ncols=%d", lines_scanned, this_count)
    finally:
        stream.rewind()

    header_line_count = max(lines_scanned - 2, 0)
    if not stabilized:
        column_count = 0

    if saw_nan:
        logger.warning("NaNs in file.")
    if saw_inf:
        logger.warning("Infs in file.")
    if too_many_columns:
        logger.warning("Too many columns in file: counts clamped to %d.", max_columns)
    if hit_limit:
        logger.warning(
            "Column count did not stabilise within %d lines.", max_header_lines
        )
    if column_count == 0:
        logger.warning("No columns of real numbers found.")

    return ColumnCountResult(
        header_line_count=header_line_count,
        column_count=column_count,
        saw_nan=saw_nan,
        saw_inf=saw_inf,
        stabilized=stabilized,
        lines_scanned=lines_scanned,
        too_many_columns=too_many_columns,
    )


# ---------------------------------------------------------------------------
# Row counting
# ---------------------------------------------------------------------------


def count_rows(
    stream: LineStream,
    header_line_count: int,
    column_count: int | None = None,
    max_rows: int | None = None,
) -> int:
    """Count the data rows that follow the header.

    Skips *header_line_count* lines from the current position, then counts
    consecutive lines that parse as a row: at least one leading numeric
    field, or at least *column_count* of them when given.  The first line
    that fails, the end of the stream, or reaching *max_rows* stops
    counting.  The stream is not rewound.
    """
    for _ in range(header_line_count):
        if stream.next_line() is None:
            return 0

    required = column_count or 1
    rows = 0
    while max_rows is None or rows < max_rows:
        line = stream.next_line()
        if line is None:
            break
        if scan_numeric_fields(line, max_fields=required).count < required:
            break
        rows += 1
    return rows


def last_header_line(
    stream: LineStream, header_line_count: int
) -> tuple[str | None, int | None]:
    """Return the last non-blank header line and its 1-based line number.

    Reads *header_line_count* lines from the current position, which must
    be the start of the stream, and leaves the stream at the first data
    line.  Returns ``(None, None)`` when every header line is blank.
    """
    found: str | None = None
    number: int | None = None
    for index in range(1, header_line_count + 1):
        line = stream.next_line()
        if line is None:
            break
        if line.strip():
            found = line
            number = index
    return found, number


def count_comment_lines(stream: LineStream) -> int:
    """Count the lines read before the first line that starts with a number.

    Unlike :func:`detect_columns` this makes no attempt to work out the
    number of data columns.  The stream must be at the desired starting
    position and is left just past the first numeric line.
    """
    count = 0
    while True:
        line = stream.next_line()
        if line is None:
            return count
        if scan_numeric_fields(line, max_fields=1).count:
            return count
        count += 1
