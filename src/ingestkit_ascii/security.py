"""Pre-flight scanner for ASCII table files.

Rejects missing, empty, oversized or binary files before any detection
begins.
"""

from __future__ import annotations

import logging
import os

from ingestkit_ascii.config import ASCIIProcessorConfig
from ingestkit_ascii.errors import ErrorCode, IngestError

logger = logging.getLogger("ingestkit_ascii")


class ASCIISecurityScanner:
    """Run pre-flight checks on a text file.

    Returns a list of errors/warnings.  Fatal errors (``E_*`` codes) mean
    the file should not be processed further.
    """

    def __init__(self, config: ASCIIProcessorConfig) -> None:
        self.config = config

    def scan(self, file_path: str) -> list[IngestError]:
        """Run all pre-flight checks.

        Returns:
            List of errors/warnings.  Fatal errors have codes starting
            with ``E_``.
        """
        errors: list[IngestError] = []

        # --- 1. File existence ---
        if not os.path.isfile(file_path):
            errors.append(
                IngestError(
                    code=ErrorCode.E_PARSE_CORRUPT,
                    message=f"File not found or not readable: {file_path}",
                    stage="security",
                )
            )
            return errors

        # --- 2. Empty file ---
        file_size = os.path.getsize(file_path)
        if file_size == 0:
            errors.append(
                IngestError(
                    code=ErrorCode.E_PARSE_EMPTY,
                    message=f"File is empty (0 bytes): {file_path}",
                    stage="security",
                )
            )
            return errors

        # --- 3. File size limit ---
        max_bytes = self.config.max_file_size_mb * 1024 * 1024
        if file_size > max_bytes:
            errors.append(
                IngestError(
                    code=ErrorCode.E_SECURITY_TOO_LARGE,
                    message=(
                        f"File size {file_size} bytes exceeds limit of "
                        f"{max_bytes} bytes ({self.config.max_file_size_mb} MB)"
                    ),
                    stage="security",
                )
            )
            return errors

        # --- 4. Binary content ---
        try:
            with open(file_path, "rb") as fh:
                head = fh.read(self.config.binary_sniff_bytes)
        except OSError as exc:
            errors.append(
                IngestError(
                    code=ErrorCode.E_PARSE_CORRUPT,
                    message=f"Cannot read file: {exc}",
                    stage="security",
                )
            )
            return errors

        if b"\x00" in head:
            errors.append(
                IngestError(
                    code=ErrorCode.E_SECURITY_BINARY,
                    message=f"File looks binary (NUL byte in first {len(head)} bytes)",
                    stage="security",
                )
            )
            return errors

        # --- 5. Large file warning ---
        large_threshold = self.config.large_file_warning_mb * 1024 * 1024
        if file_size > large_threshold:
            errors.append(
                IngestError(
                    code=ErrorCode.W_LARGE_FILE,
                    message=(
                        f"File is {file_size / (1024 * 1024):.1f} MB "
                        f"(> {self.config.large_file_warning_mb} MB)"
                    ),
                    stage="security",
                    recoverable=True,
                )
            )

        return errors
