"""Unit tests for ingestkit_ascii.security -- pre-flight scanner."""

from __future__ import annotations

import pytest

from ingestkit_ascii.config import ASCIIProcessorConfig
from ingestkit_ascii.errors import ErrorCode
from ingestkit_ascii.security import ASCIISecurityScanner


@pytest.fixture
def scanner(default_config) -> ASCIISecurityScanner:
    return ASCIISecurityScanner(default_config)


class TestFileNotFound:
    def test_nonexistent_file(self, scanner, tmp_path):
        errors = scanner.scan(str(tmp_path / "nonexistent.dat"))
        assert len(errors) == 1
        assert errors[0].code == ErrorCode.E_PARSE_CORRUPT

    def test_directory(self, scanner, tmp_path):
        errors = scanner.scan(str(tmp_path))
        assert errors[0].code == ErrorCode.E_PARSE_CORRUPT


class TestEmptyFile:
    def test_empty_file(self, scanner, tmp_text_file):
        errors = scanner.scan(tmp_text_file(""))
        assert any(e.code == ErrorCode.E_PARSE_EMPTY for e in errors)


class TestFileSizeLimit:
    def test_too_large(self, tmp_text_file):
        scanner = ASCIISecurityScanner(ASCIIProcessorConfig(max_file_size_mb=0))
        errors = scanner.scan(tmp_text_file("1 2\n3 4\n"))
        assert any(e.code == ErrorCode.E_SECURITY_TOO_LARGE for e in errors)

    def test_large_file_warning(self, tmp_text_file):
        config = ASCIIProcessorConfig(large_file_warning_mb=0)
        scanner = ASCIISecurityScanner(config)
        errors = scanner.scan(tmp_text_file("1 2\n3 4\n"))
        assert [e.code for e in errors] == [ErrorCode.W_LARGE_FILE]
        assert errors[0].recoverable is True


class TestBinaryContent:
    def test_nul_byte_rejected(self, scanner, tmp_path):
        fp = tmp_path / "data.bin"
        fp.write_bytes(b"\x00\x01\x02binary")
        errors = scanner.scan(str(fp))
        assert any(e.code == ErrorCode.E_SECURITY_BINARY for e in errors)

    def test_nul_after_sniff_window_not_seen(self, tmp_path):
        scanner = ASCIISecurityScanner(ASCIIProcessorConfig(binary_sniff_bytes=4))
        fp = tmp_path / "data.dat"
        fp.write_bytes(b"1 2\n\x00")
        assert scanner.scan(str(fp)) == []


class TestValidFile:
    def test_valid_file_passes(self, scanner, tmp_text_file, sample_table_text):
        assert scanner.scan(tmp_text_file(sample_table_text)) == []
