"""Configuration model for the ingestkit-ascii sniffer.

Provides ``ASCIIProcessorConfig`` with every tunable bound used by the
detector, label extractor, readers and pre-flight scanner.  Supports
loading overrides from YAML or JSON files via the ``from_file()``
classmethod.
"""

from __future__ import annotations

import json
import pathlib

from pydantic import BaseModel, Field


class ASCIIProcessorConfig(BaseModel):
    """All tunable parameters with sensible defaults.

    Override individual values via constructor kwargs or load a complete
    config from a file with ``ASCIIProcessorConfig.from_file(path)``.
    """

    # --- Identity ---
    parser_version: str = "ingestkit_ascii:1.0.0"

    # --- Detection bounds ---
    max_header_lines: int = Field(
        default=1000,
        ge=0,
        description="Maximum number of lines scanned while looking for data.",
    )
    max_columns_per_line: int = Field(
        default=1000,
        ge=1,
        description="Maximum number of numeric fields counted on one line.",
    )
    max_labels: int = Field(
        default=100,
        ge=0,
        description="Capacity of the label buffer returned by the extractor.",
    )

    # --- Reading ---
    encoding: str = "utf-8"
    encoding_errors: str = "replace"
    max_lines: int | None = None

    # --- Pre-flight checks ---
    max_file_size_mb: int = 500
    large_file_warning_mb: int = 50
    binary_sniff_bytes: int = 8192
    supported_extensions: list[str] = [
        ".txt",
        ".dat",
        ".csv",
        ".tsv",
        ".asc",
        ".ascii",
        ".out",
        ".ev",
    ]

    # --- Logging / PII safety ---
    log_sample_data: bool = False

    @classmethod
    def from_file(cls, path: str) -> ASCIIProcessorConfig:
        """Load configuration from a YAML or JSON file.

        File format is detected by extension: ``.yaml`` / ``.yml`` for YAML,
        ``.json`` for JSON.  Any keys present in the file override the
        corresponding defaults; keys not present retain their defaults.

        Args:
            path: Filesystem path to the configuration file.

        Returns:
            A fully-populated ``ASCIIProcessorConfig`` instance.

        Raises:
            FileNotFoundError: If *path* does not exist.
            ValueError: If the file extension is not recognized.
        """
        file_path = pathlib.Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        suffix = file_path.suffix.lower()

        if suffix in (".yaml", ".yml"):
            import yaml

            with open(file_path) as fh:
                data = yaml.safe_load(fh)
        elif suffix == ".json":
            with open(file_path) as fh:
                data = json.load(fh)
        else:
            raise ValueError(
                f"Unsupported config file extension '{suffix}'. "
                "Use .yaml, .yml, or .json."
            )

        if data is None:
            data = {}

        return cls(**data)
