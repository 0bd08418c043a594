"""Tests for ingestkit_ascii.errors."""

from __future__ import annotations

from ingestkit_ascii.errors import ErrorCode, IngestError


class TestErrorCode:
    def test_values_equal_names(self):
        for code in ErrorCode:
            assert code.value == code.name

    def test_prefixes(self):
        for code in ErrorCode:
            assert code.value.startswith(("E_", "W_"))

    def test_is_str(self):
        assert ErrorCode.E_PARSE_EMPTY == "E_PARSE_EMPTY"


class TestIngestError:
    def test_defaults(self):
        err = IngestError(code=ErrorCode.E_PARSE_CORRUPT, message="bad")
        assert err.stage is None
        assert err.recoverable is False
        assert err.line_number is None

    def test_all_fields(self):
        err = IngestError(
            code=ErrorCode.W_NO_LABELS,
            message="no labels",
            stage="labels",
            recoverable=True,
            line_number=3,
        )
        assert err.code == ErrorCode.W_NO_LABELS
        assert err.line_number == 3
        assert err.model_dump()["code"] == ErrorCode.W_NO_LABELS

    def test_code_from_string(self):
        err = IngestError(code="W_LARGE_FILE", message="big")
        assert err.code is ErrorCode.W_LARGE_FILE
