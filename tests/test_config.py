"""Tests for ingestkit_ascii.config."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from ingestkit_ascii.config import ASCIIProcessorConfig


class TestDefaults:
    def test_default_values(self):
        config = ASCIIProcessorConfig()
        assert config.parser_version == "ingestkit_ascii:1.0.0"
        assert config.max_header_lines == 1000
        assert config.max_columns_per_line == 1000
        assert config.max_labels == 100
        assert config.encoding == "utf-8"
        assert config.encoding_errors == "replace"
        assert config.max_lines is None
        assert config.log_sample_data is False
        assert ".dat" in config.supported_extensions

    def test_overrides(self):
        config = ASCIIProcessorConfig(max_labels=5, max_lines=10)
        assert config.max_labels == 5
        assert config.max_lines == 10

    def test_negative_header_limit_rejected(self):
        with pytest.raises(ValidationError):
            ASCIIProcessorConfig(max_header_lines=-1)

    def test_zero_column_limit_rejected(self):
        with pytest.raises(ValidationError):
            ASCIIProcessorConfig(max_columns_per_line=0)


class TestFromFile:
    def test_json(self, tmp_path):
        fp = tmp_path / "config.json"
        fp.write_text(json.dumps({"max_labels": 7, "encoding": "latin-1"}))
        config = ASCIIProcessorConfig.from_file(str(fp))
        assert config.max_labels == 7
        assert config.encoding == "latin-1"
        assert config.max_header_lines == 1000

    def test_yaml(self, tmp_path):
        pytest.importorskip("yaml")
        fp = tmp_path / "config.yaml"
        fp.write_text("max_header_lines: 50\nlog_sample_data: true\n")
        config = ASCIIProcessorConfig.from_file(str(fp))
        assert config.max_header_lines == 50
        assert config.log_sample_data is True

    def test_empty_yaml_gives_defaults(self, tmp_path):
        pytest.importorskip("yaml")
        fp = tmp_path / "config.yml"
        fp.write_text("")
        assert ASCIIProcessorConfig.from_file(str(fp)) == ASCIIProcessorConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ASCIIProcessorConfig.from_file(str(tmp_path / "nope.yaml"))

    def test_unsupported_extension(self, tmp_path):
        fp = tmp_path / "config.toml"
        fp.write_text("max_labels = 3\n")
        with pytest.raises(ValueError, match="Unsupported config file extension"):
            ASCIIProcessorConfig.from_file(str(fp))
