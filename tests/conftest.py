"""Shared test fixtures for ingestkit-ascii tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from ingestkit_ascii.config import ASCIIProcessorConfig


@pytest.fixture
def default_config() -> ASCIIProcessorConfig:
    """Return a default ASCIIProcessorConfig."""
    return ASCIIProcessorConfig()


@pytest.fixture
def sample_table_text() -> str:
    """A small splash-style table: comments, a label row, then data."""
    return (
        "# output from a test run\n"
        "# time = 0.1\n"
        "#  [ x ]  [ y ]  [ density ]\n"
        "0.0 1.0 2.0\n"
        "0.5 1.5 2.5\n"
        "1.0 2.0 3.0\n"
        "1.5 2.5 3.5\n"
    )


@pytest.fixture
def tmp_text_file(tmp_path: Path):
    """Factory fixture to write text to a temp file and return the path."""

    def _write(text: str, filename: str = "test.dat") -> str:
        file_path = tmp_path / filename
        with open(file_path, "w", encoding="utf-8") as fh:
            fh.write(text)
        return str(file_path)

    return _write
