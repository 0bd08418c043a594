"""ASCIITableRouter -- orchestrator and public API for ingestkit-ascii.

Routes a text file through the sniffing pipeline:

1. Security scan via :class:`ASCIISecurityScanner`.
2. Open the file as a rewindable line stream.
3. Detect header length and column count via :func:`detect_columns`.
4. Extract labels from the last non-blank header line via
   :func:`get_column_labels`.
5. Count data rows via :func:`count_rows`.
6. Assemble and return :class:`TableProfile`.

The router enforces **fail-closed** semantics: problems with the file or
its content never raise; they are reported as error codes on a result
with zero counts.
"""

from __future__ import annotations

import asyncio
import logging
import os
import time

from ingestkit_ascii.columns import count_rows, detect_columns, last_header_line
from ingestkit_ascii.config import ASCIIProcessorConfig
from ingestkit_ascii.errors import ErrorCode, IngestError
from ingestkit_ascii.labels import get_column_labels
from ingestkit_ascii.models import ColumnCountResult, LabelSet, TableProfile
from ingestkit_ascii.security import ASCIISecurityScanner
from ingestkit_ascii.streams import open_line_stream

logger = logging.getLogger("ingestkit_ascii")


class ASCIITableRouter:
    """Top-level orchestrator for the ingestkit-ascii pipeline.

    Parameters
    ----------
    config:
        Pipeline configuration.  Uses defaults when *None*.
    """

    def __init__(self, config: ASCIIProcessorConfig | None = None) -> None:
        self._config = config or ASCIIProcessorConfig()
        self._security_scanner = ASCIISecurityScanner(self._config)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def can_handle(self, file_path: str) -> bool:
        """Return True if the extension of *file_path* is a supported one (case-insensitive)."""
        suffix = os.path.splitext(file_path)[1].lower()
        return suffix in {ext.lower() for ext in self._config.supported_extensions}

    def process(self, file_path: str) -> TableProfile:
        """Sniff the table layout of a single text file.

        Parameters
        ----------
        file_path:
            Filesystem path to the file.

        Returns
        -------
        TableProfile
            The fully-assembled result.
        """
        overall_start = time.monotonic()
        config = self._config
        filename = os.path.basename(file_path)

        # ==============================================================
        # Step 1: Security Scan
        # ==============================================================
        security_errors = self._security_scanner.scan(file_path)
        fatal_errors = [e for e in security_errors if e.code.startswith("E_")]
        warnings = [e for e in security_errors if not e.code.startswith("E_")]

        if fatal_errors:
            logger.error(
                "ingestkit_ascii | file=%s | code=%s | detail=%s",
                filename,
                fatal_errors[0].code.value,
                fatal_errors[0].message,
            )
            return self._result(
                file_path,
                overall_start,
                errors=[e.code.value for e in fatal_errors],
                details=security_errors,
            )

        details: list[IngestError] = list(warnings)

        # ==============================================================
        # Steps 2-5: Detect, Label, Count
        # ==============================================================
        try:
            with open_line_stream(
                file_path, encoding=config.encoding, errors=config.encoding_errors
            ) as stream:
                shape = detect_columns(
                    stream,
                    max_header_lines=config.max_header_lines,
                    max_columns=config.max_columns_per_line,
                    log_sample_data=config.log_sample_data,
                )
                details.extend(self._shape_warnings(shape))

                if shape.column_count == 0:
                    err = IngestError(
                        code=ErrorCode.E_DETECT_NO_COLUMNS,
                        message="No columns of real numbers found",
                        stage="detect",
                    )
                    logger.error(
                        "ingestkit_ascii | file=%s | code=%s | detail=%s",
                        filename,
                        err.code.value,
                        err.message,
                    )
                    return self._result(
                        file_path,
                        overall_start,
                        shape=shape,
                        errors=[err.code.value],
                        details=[*details, err],
                    )

                label_line, line_number = last_header_line(
                    stream, shape.header_line_count
                )
                labels = get_column_labels(label_line or "", capacity=config.max_labels)
                details.extend(self._label_warnings(labels, line_number))

                stream.rewind()
                limit = config.max_lines
                row_count = count_rows(
                    stream,
                    shape.header_line_count,
                    shape.column_count,
                    max_rows=None if limit is None else limit + 1,
                )
                if limit is not None and row_count > limit:
                    row_count = limit
                    details.append(
                        IngestError(
                            code=ErrorCode.W_LINES_TRUNCATED,
                            message=f"Row count clamped to max_lines = {limit}",
                            stage="rows",
                            recoverable=True,
                        )
                    )
        except (OSError, UnicodeDecodeError) as exc:
            err = IngestError(
                code=ErrorCode.E_PARSE_CORRUPT,
                message=f"Failed to read file: {exc}",
                stage="parse",
            )
            logger.error(
                "ingestkit_ascii | file=%s | code=%s | detail=%s",
                filename,
                err.code.value,
                err.message,
            )
            return self._result(
                file_path,
                overall_start,
                errors=[err.code.value],
                details=[*details, err],
            )

        # ==============================================================
        # Step 6: Assemble Result
        # ==============================================================
        result = self._result(
            file_path,
            overall_start,
            shape=shape,
            row_count=row_count,
            labels=labels,
            label_line=label_line,
            details=details,
        )

        logger.info(
            "ingestkit_ascii | file=%s | header=%d | columns=%d | rows=%d | "
            "labels=%d | time=%.3fs",
            filename,
            result.header_line_count,
            result.column_count,
            result.row_count,
            labels.count,
            result.processing_time_seconds,
        )
        return result

    async def aprocess(self, file_path: str) -> TableProfile:
        """Async wrapper around :meth:`process`.

        Offloads the synchronous ``process()`` call to a thread via
        ``asyncio.to_thread()``.
        """
        return await asyncio.to_thread(self.process, file_path)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _shape_warnings(self, shape: ColumnCountResult) -> list[IngestError]:
        warnings: list[IngestError] = []
        if shape.saw_nan:
            warnings.append(
                IngestError(
                    code=ErrorCode.W_NAN_IN_FILE,
                    message="NaNs in file",
                    stage="detect",
                    recoverable=True,
                )
            )
        if shape.saw_inf:
            warnings.append(
                IngestError(
                    code=ErrorCode.W_INF_IN_FILE,
                    message="Infs in file",
                    stage="detect",
                    recoverable=True,
                )
            )
        if shape.too_many_columns:
            warnings.append(
                IngestError(
                    code=ErrorCode.W_TOO_MANY_COLUMNS,
                    message=(
                        "Too many columns in file, counts clamped to "
                        f"{self._config.max_columns_per_line}"
                    ),
                    stage="detect",
                    recoverable=True,
                )
            )
        if not shape.stabilized and shape.lines_scanned > self._config.max_header_lines:
            warnings.append(
                IngestError(
                    code=ErrorCode.W_HEADER_LIMIT_REACHED,
                    message=(
                        "Column count did not stabilise within "
                        f"{self._config.max_header_lines} lines"
                    ),
                    stage="detect",
                    recoverable=True,
                )
            )
        return warnings

    def _label_warnings(
        self, labels: LabelSet, line_number: int | None
    ) -> list[IngestError]:
        if labels.count == 0:
            return [
                IngestError(
                    code=ErrorCode.W_NO_LABELS,
                    message="No column labels found in header",
                    stage="labels",
                    recoverable=True,
                    line_number=line_number,
                )
            ]
        if labels.truncated:
            return [
                IngestError(
                    code=ErrorCode.W_LABELS_TRUNCATED,
                    message=(
                        f"Found {labels.count} labels, only {labels.capacity} kept"
                    ),
                    stage="labels",
                    recoverable=True,
                    line_number=line_number,
                )
            ]
        return []

    def _result(
        self,
        file_path: str,
        started: float,
        shape: ColumnCountResult | None = None,
        row_count: int = 0,
        labels: LabelSet | None = None,
        label_line: str | None = None,
        errors: list[str] | None = None,
        details: list[IngestError] | None = None,
    ) -> TableProfile:
        details = details or []
        shape = shape or ColumnCountResult()
        return TableProfile(
            file_path=file_path,
            parser_version=self._config.parser_version,
            header_line_count=shape.header_line_count if shape.column_count else 0,
            column_count=shape.column_count,
            row_count=row_count,
            labels=labels,
            label_line=label_line,
            saw_nan=shape.saw_nan,
            saw_inf=shape.saw_inf,
            errors=errors or [],
            warnings=[e.code.value for e in details if not e.code.startswith("E_")],
            error_details=details,
            processing_time_seconds=time.monotonic() - started,
        )

