"""Custom exceptions for wordvecs."""


class WordVecsError(Exception):
    """Base exception for all wordvecs errors."""

    pass


class ConfigurationError(WordVecsError):
    """Raised when loader configuration or a format argument is invalid."""

    pass


class FormatError(WordVecsError):
    """Raised when an embedding file cannot be decoded."""

    pass


class InvalidHeaderError(FormatError):
    """Raised when a binary header line is not two integers."""

    pass


class TruncatedFileError(FormatError):
    """Raised when a binary stream ends before all declared records are read."""

    pass


class EmptyVocabularyError(FormatError):
    """Raised when no embedding rows could be read."""

    pass


class MalformedRecordError(FormatError):
    """Raised when a binary record's word is empty, too long or undecodable."""

    def __init__(self, message: str, record: int = -1):
        super().__init__(message)
        self.record = record


class ValidationError(WordVecsError):
    """Raised when vocabulary and matrix violate store invariants."""

    pass


class ShapeMismatchError(ValidationError):
    """Raised when the matrix does not have one row per vocabulary entry."""

    pass


class ZeroNormVectorError(ValidationError):
    """Raised when a vocabulary entry's vector has no positive norm."""

    def __init__(self, word: str, position: int):
        super().__init__(f"Embedding vector has zero or non-finite norm for word {word!r} (row {position})")
        self.word = word
        self.position = position


class WordNotFoundError(WordVecsError, KeyError):
    """Raised when a word is not in the store's vocabulary."""

    def __init__(self, word: str):
        super().__init__(word)
        self.word = word

    def __str__(self) -> str:
        return f"Word not in vocabulary: {self.word!r}"
