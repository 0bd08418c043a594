"""ingestkit-ascii -- Heuristic ASCII table sniffer for the ingestkit framework.

Public API re-exports for convenient access.
"""

from ingestkit_ascii.columns import (
    count_comment_lines,
    count_numeric_columns,
    count_rows,
    detect_columns,
    last_header_line,
    parse_real,
    scan_numeric_fields,
)
from ingestkit_ascii.config import ASCIIProcessorConfig
from ingestkit_ascii.errors import ErrorCode, IngestError
from ingestkit_ascii.labels import count_sensible_labels, get_column_labels, is_sensible_label
from ingestkit_ascii.models import (
    ColumnCountResult,
    LabelSet,
    LineScan,
    SplitResult,
    TableData,
    TableProfile,
)
from ingestkit_ascii.protocols import LineStream
from ingestkit_ascii.reader import (
    get_line_containing,
    read_ascii_lines,
    read_real_string_pairs,
    read_real_values,
    read_table,
)
from ingestkit_ascii.router import ASCIITableRouter
from ingestkit_ascii.security import ASCIISecurityScanner
from ingestkit_ascii.streams import ListLineStream, TextLineStream, open_line_stream
from ingestkit_ascii.strings import (
    add_escape_chars,
    basename,
    cstring,
    enumerate_choice,
    fstring,
    isdigit,
    lcase,
    safename,
    string_delete,
    string_replace,
    string_sub,
    ucase,
)
from ingestkit_ascii.tokenizer import iter_tokens, split

__all__ = [
    # Router
    "ASCIITableRouter",
    "ASCIISecurityScanner",
    # Config
    "ASCIIProcessorConfig",
    # Errors
    "ErrorCode",
    "IngestError",
    # Models
    "LineScan",
    "ColumnCountResult",
    "SplitResult",
    "LabelSet",
    "TableData",
    "TableProfile",
    # Streams
    "LineStream",
    "ListLineStream",
    "TextLineStream",
    "open_line_stream",
    # Detection
    "parse_real",
    "scan_numeric_fields",
    "count_numeric_columns",
    "detect_columns",
    "count_rows",
    "count_comment_lines",
    "last_header_line",
    # Labels
    "split",
    "iter_tokens",
    "is_sensible_label",
    "count_sensible_labels",
    "get_column_labels",
    # Readers
    "read_ascii_lines",
    "read_real_values",
    "read_real_string_pairs",
    "read_table",
    "get_line_containing",
    # Strings
    "ucase",
    "lcase",
    "isdigit",
    "string_replace",
    "string_delete",
    "string_sub",
    "safename",
    "add_escape_chars",
    "basename",
    "cstring",
    "fstring",
    "enumerate_choice",
]
