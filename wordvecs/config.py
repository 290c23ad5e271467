"""Configuration management for wordvecs."""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .types import EmbeddingFormat


# Format assumed when the sniffer's line scan finds no text row
DEFAULT_FALLBACK_FORMAT = EmbeddingFormat.BINARY


@dataclass
class LoaderConfig:
    """Loader configuration.

    Attributes:
        sniff_max_lines: Maximum number of lines the format sniffer inspects
        sniff_max_bytes: Maximum number of bytes the format sniffer reads
        sniff_float_sample: Number of vector tokens checked per candidate line
        header_dim_limit: Upper bound (exclusive) on the dimension accepted by
            the 8-byte binary header probe
        fallback_format: Format assumed when the sniffer finds no text row
        max_word_bytes: Longest word accepted in a binary record
        max_header_bytes: Longest binary header line accepted
        unicode_errors: Decode error handler for binary words ('strict',
            'replace', 'ignore')
    """

    # Sniffer
    sniff_max_lines: int = 10
    sniff_max_bytes: int = 64 * 1024
    sniff_float_sample: int = 5
    header_dim_limit: int = 1000
    fallback_format: EmbeddingFormat = DEFAULT_FALLBACK_FORMAT

    # Binary parser
    max_word_bytes: int = 4096
    max_header_bytes: int = 1024
    unicode_errors: str = "strict"

    def __post_init__(self) -> None:
        try:
            self.fallback_format = EmbeddingFormat.parse(self.fallback_format)
        except ValueError as e:
            raise ConfigurationError(str(e))
        self.validate()

    def validate(self) -> None:
        """Check that every limit is usable.

        Raises:
            ConfigurationError: If a value is out of range
        """
        for name in ("sniff_max_lines", "sniff_max_bytes", "sniff_float_sample",
                     "header_dim_limit", "max_word_bytes", "max_header_bytes"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")

        if self.unicode_errors not in ("strict", "replace", "ignore"):
            raise ConfigurationError(
                f"unicode_errors must be 'strict', 'replace' or 'ignore', got {self.unicode_errors!r}"
            )

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "LoaderConfig":
        """Load configuration from environment variables.

        Args:
            env_file: Path to .env file (optional)

        Returns:
            LoaderConfig instance with values from environment
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        try:
            return cls(
                sniff_max_lines=int(os.getenv("WORDVECS_SNIFF_MAX_LINES", "10")),
                sniff_max_bytes=int(os.getenv("WORDVECS_SNIFF_MAX_BYTES", str(64 * 1024))),
                sniff_float_sample=int(os.getenv("WORDVECS_SNIFF_FLOAT_SAMPLE", "5")),
                header_dim_limit=int(os.getenv("WORDVECS_HEADER_DIM_LIMIT", "1000")),
                fallback_format=os.getenv("WORDVECS_FALLBACK_FORMAT", "binary"),
                max_word_bytes=int(os.getenv("WORDVECS_MAX_WORD_BYTES", "4096")),
                max_header_bytes=int(os.getenv("WORDVECS_MAX_HEADER_BYTES", "1024")),
                unicode_errors=os.getenv("WORDVECS_UNICODE_ERRORS", "strict"),
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid WORDVECS_* environment value: {e}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LoaderConfig":
        """Load configuration from dictionary.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            LoaderConfig instance
        """
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__annotations__})
