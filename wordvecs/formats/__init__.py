"""On-disk embedding formats: detection, parsing and writing.

Two encodings are supported:
- text: ``word float float ...`` lines with an optional ``"V D"`` header
- binary: ``"V D\\n"`` header followed by packed word/float32 records
"""

from ..types import EmbeddingFormat
from .sniffer import BINARY_EXTENSIONS, DEFAULT_FALLBACK_FORMAT, classify, classify_prefix
from .text import parse_text, parse_text_lines
from .binary import parse_binary, parse_binary_file, parse_header
from .writer import write_text, write_binary

__all__ = [
    "EmbeddingFormat",
    "BINARY_EXTENSIONS",
    "DEFAULT_FALLBACK_FORMAT",
    # Detection
    "classify",
    "classify_prefix",
    # Parsing
    "parse_text",
    "parse_text_lines",
    "parse_binary",
    "parse_binary_file",
    "parse_header",
    # Writing
    "write_text",
    "write_binary",
]
