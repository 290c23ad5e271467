"""Shared types for wordvecs."""
from enum import Enum
from typing import Union

import numpy as np


# Store-wide float width; parsers convert to this at their boundary
DTYPE = np.float32

# Byte order of vectors in the packed binary layout
BINARY_FLOAT = np.dtype("<f4")


class EmbeddingFormat(str, Enum):
    """On-disk encoding of an embedding file."""
    TEXT = "text"
    BINARY = "binary"

    @classmethod
    def parse(cls, value: Union[str, "EmbeddingFormat"]) -> "EmbeddingFormat":
        """Coerce a string such as ``"text"`` or ``"BINARY"`` to a format."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown embedding format: {value!r}") from None
