"""wordvecs - load pretrained word embeddings into an immutable store.

Features:
- Text (``word f1 f2 ...``) and packed binary (word2vec) formats
- Format detection from a bounded prefix of the file
- Validated, read-only EmbeddingStore with word index and cached norms
- Cosine similarity, nearest neighbours and analogy queries
"""

from .config import LoaderConfig
from .exceptions import (
    WordVecsError,
    ConfigurationError,
    FormatError,
    InvalidHeaderError,
    TruncatedFileError,
    EmptyVocabularyError,
    MalformedRecordError,
    ValidationError,
    ShapeMismatchError,
    ZeroNormVectorError,
    WordNotFoundError,
)
from .types import EmbeddingFormat
from .store import EmbeddingStore
from .accessors import (
    get_embedding,
    get_embedding_norm,
    vocabulary_size,
    dimension,
    similarity,
    most_similar,
    analogy,
)
from .formats import classify, parse_text, parse_binary, write_text, write_binary
from .loader import load_pretrained, load_embeddings
from .utils.logging import setup_logging

__version__ = "0.1.0"
__all__ = [
    # Loading
    "load_pretrained",
    "load_embeddings",
    "LoaderConfig",
    "EmbeddingFormat",
    "classify",
    "parse_text",
    "parse_binary",
    "write_text",
    "write_binary",
    # Store and queries
    "EmbeddingStore",
    "get_embedding",
    "get_embedding_norm",
    "vocabulary_size",
    "dimension",
    "similarity",
    "most_similar",
    "analogy",
    # Errors
    "WordVecsError",
    "ConfigurationError",
    "FormatError",
    "InvalidHeaderError",
    "TruncatedFileError",
    "EmptyVocabularyError",
    "MalformedRecordError",
    "ValidationError",
    "ShapeMismatchError",
    "ZeroNormVectorError",
    "WordNotFoundError",
    "setup_logging",
]
