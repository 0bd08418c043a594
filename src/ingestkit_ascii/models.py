"""Pydantic data models for ingestkit-ascii.

Contains the per-line scan result (``LineScan``), the detector output
(``ColumnCountResult``), the fixed-capacity buffer results (``SplitResult``
and ``LabelSet``), the parsed table (``TableData``) and the router result
(``TableProfile``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from ingestkit_ascii.errors import IngestError

if TYPE_CHECKING:
    import pandas as pd


# ---------------------------------------------------------------------------
# Line-level models
# ---------------------------------------------------------------------------


class LineScan(BaseModel):
    """Leading numeric fields of one line.

    ``values`` holds every field parsed before the first failure (NaN and
    infinities included).  ``stop_index`` is the index of the field that
    stopped the scan, or the number of fields when all of them parsed.
    ``field_count`` is the number of fields on the line and ``truncated`` is
    set when the per-line field limit was reached.
    """

    values: list[float] = []
    stop_index: int = 0
    field_count: int = 0
    truncated: bool = False

    @property
    def count(self) -> int:
        return len(self.values)

    @property
    def complete(self) -> bool:
        """True when every field on the line parsed."""
        return self.stop_index >= self.field_count


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------


class ColumnCountResult(BaseModel):
    """Shape of the table found by :func:`~ingestkit_ascii.columns.detect_columns`.

    ``column_count`` is 0 when no stable run of numeric rows was found;
    callers must treat that as "undetectable".  ``saw_nan`` / ``saw_inf``
    are advisory only.
    """

    model_config = ConfigDict(frozen=True)

    header_line_count: int = 0
    column_count: int = 0
    saw_nan: bool = False
    saw_inf: bool = False
    stabilized: bool = False
    lines_scanned: int = 0
    too_many_columns: bool = False


# ---------------------------------------------------------------------------
# Fixed-capacity buffers
# ---------------------------------------------------------------------------


class SplitResult(BaseModel):
    """Output of :func:`~ingestkit_ascii.tokenizer.split`.

    ``parts`` holds at most ``capacity`` tokens; ``total`` is the number of
    tokens found in the string and may be larger.
    """

    model_config = ConfigDict(frozen=True)

    parts: list[str] = []
    total: int = 0
    capacity: int | None = None

    @property
    def truncated(self) -> bool:
        return self.total > len(self.parts)


class LabelSet(BaseModel):
    """Column labels recovered from a header line.

    ``count`` is authoritative and may exceed ``capacity``; only the first
    ``min(count, capacity)`` labels are materialised.
    """

    model_config = ConfigDict(frozen=True)

    count: int = 0
    labels: list[str] = []
    capacity: int = 0

    @property
    def usable(self) -> list[str]:
        return self.labels[: min(self.count, self.capacity)]

    @property
    def truncated(self) -> bool:
        return self.count > self.capacity


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class TableData(BaseModel):
    """Numeric table read by :func:`~ingestkit_ascii.reader.read_table`."""

    header_line_count: int = 0
    column_count: int = 0
    labels: list[str] = []
    rows: list[list[float]] = []

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def column_names(self) -> list[str]:
        """Labels for every column, positional names where labels are missing."""
        names = list(self.labels[: self.column_count])
        for i in range(len(names), self.column_count):
            names.append(f"col_{i + 1}")
        return names

    def to_dataframe(self) -> pd.DataFrame:
        """Return the rows as a ``pandas.DataFrame`` named by :meth:`column_names`."""
        import pandas as pd

        return pd.DataFrame(self.rows, columns=self.column_names(), dtype=float)


class TableProfile(BaseModel):
    """Final result of ``ASCIITableRouter.process()``."""

    file_path: str
    parser_version: str = ""
    header_line_count: int = 0
    column_count: int = 0
    row_count: int = 0
    labels: LabelSet | None = None
    label_line: str | None = None
    saw_nan: bool = False
    saw_inf: bool = False
    errors: list[str] = []
    warnings: list[str] = []
    error_details: list[IngestError] = []
    processing_time_seconds: float = 0.0
