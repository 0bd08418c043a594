"""Whole-file readers built on the detection core.

These helpers open the file themselves; ``OSError`` from opening or
reading propagates to the caller.
"""

from __future__ import annotations

import logging
import re

from ingestkit_ascii.columns import (
    detect_columns,
    last_header_line,
    parse_real,
    scan_numeric_fields,
)
from ingestkit_ascii.config import ASCIIProcessorConfig
from ingestkit_ascii.labels import get_column_labels
from ingestkit_ascii.models import TableData
from ingestkit_ascii.streams import open_line_stream

logger = logging.getLogger("ingestkit_ascii")

_RECORD_SEP_RE = re.compile(r"\s*,\s*|\s+")


def read_ascii_lines(
    file_path: str,
    max_lines: int | None = None,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> tuple[list[str], bool]:
    """Read the lines of a text file.

    Returns
    -------
    tuple[list[str], bool]
        The lines (without terminators) and whether the file had more than
        *max_lines* lines.
    """
    lines: list[str] = []
    truncated = False
    with open_line_stream(file_path, encoding=encoding, errors=errors) as stream:
        while True:
            line = stream.next_line()
            if line is None:
                break
            if max_lines is not None and len(lines) >= max_lines:
                truncated = True
                logger.warning(
                    "Line limit reached reading %s, max = %d", file_path, max_lines
                )
                break
            lines.append(line)
    return lines, truncated


def read_real_values(
    file_path: str,
    max_values: int | None = None,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> list[float]:
    """Read a file as one flat sequence of reals.

    Values may be one per line or several per line; blank lines are
    skipped.  Reading stops at the first field that is not a number.
    """
    values: list[float] = []
    with open_line_stream(file_path, encoding=encoding, errors=errors) as stream:
        while max_values is None or len(values) < max_values:
            line = stream.next_line()
            if line is None:
                break
            if not line.strip():
                continue
            if max_values is None:
                scan = scan_numeric_fields(line, max_fields=len(line))
            else:
                scan = scan_numeric_fields(line, max_fields=max_values - len(values))
            values.extend(scan.values)
            if not scan.complete:
                break
    return values


def read_real_string_pairs(
    file_path: str,
    max_pairs: int | None = None,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> list[tuple[float, str]]:
    """Read records of a real number followed by a string.

    Each non-blank line holds one record: a leading real, then the rest of
    the line (surrounding quotes removed) as its string.  Reading stops at
    the first record that does not parse or once *max_pairs* records have
    been read.
    """
    pairs: list[tuple[float, str]] = []
    with open_line_stream(file_path, encoding=encoding, errors=errors) as stream:
        number = 0
        while True:
            line = stream.next_line()
            if line is None:
                break
            number += 1
            if not line.strip():
                continue
            if max_pairs is not None and len(pairs) >= max_pairs:
                logger.warning(
                    "Record limit reached reading %s, max = %d", file_path, max_pairs
                )
                break

            fields = _RECORD_SEP_RE.split(line.strip(), maxsplit=1)
            value = parse_real(fields[0])
            text = fields[1].strip().strip("'\"") if len(fields) > 1 else ""
            if value is None or not text:
                logger.warning("Error reading %s at line %d", file_path, number)
                break
            pairs.append((value, text))
    return pairs


def read_table(
    file_path: str,
    config: ASCIIProcessorConfig | None = None,
) -> TableData:
    """Detect the table layout of a file and read its numeric rows.

    Labels are taken from the last non-blank header line.  Reading stops
    at the first row with fewer than ``column_count`` numeric fields.  A
    file with no detectable columns gives an empty ``TableData``.
    """
    config = config or ASCIIProcessorConfig()
    with open_line_stream(
        file_path, encoding=config.encoding, errors=config.encoding_errors
    ) as stream:
        shape = detect_columns(
            stream,
            max_header_lines=config.max_header_lines,
            max_columns=config.max_columns_per_line,
            log_sample_data=config.log_sample_data,
        )
        if shape.column_count == 0:
            return TableData(header_line_count=shape.header_line_count)

        label_line, _ = last_header_line(stream, shape.header_line_count)
        labels = get_column_labels(label_line or "", capacity=config.max_labels).usable

        rows: list[list[float]] = []
        while config.max_lines is None or len(rows) < config.max_lines:
            line = stream.next_line()
            if line is None:
                break
            scan = scan_numeric_fields(line, max_fields=shape.column_count)
            if scan.count < shape.column_count:
                break
            rows.append(scan.values)

    return TableData(
        header_line_count=shape.header_line_count,
        column_count=shape.column_count,
        labels=labels,
        rows=rows,
    )


def get_line_containing(
    file_path: str,
    text: str,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> int:
    """Return the 1-based number of the last line containing *text*, 0 if none."""
    found = 0
    with open_line_stream(file_path, encoding=encoding, errors=errors) as stream:
        number = 0
        while True:
            line = stream.next_line()
            if line is None:
                break
            number += 1
            if text in line:
                found = number
    return found
