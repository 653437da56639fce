"""
Configuration module for html-transpose.

Centralizes the settings the CLI and the core read, so parser choice and
output naming are not hardcoded across the codebase.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from .exceptions import ConfigurationError

SUPPORTED_PARSERS = ["html.parser", "lxml", "html5lib"]


@dataclass
class TransposeConfig:
    """Configuration for the transpose pipeline.

    Environment variables override defaults.
    """

    # BeautifulSoup tree builder
    parser: str = field(
        default_factory=lambda: os.getenv("HTML_TRANSPOSE_PARSER", "html5lib")
    )

    # File I/O
    encoding: str = field(
        default_factory=lambda: os.getenv("HTML_TRANSPOSE_ENCODING", "utf-8")
    )
    output_suffix: str = field(
        default_factory=lambda: os.getenv(
            "HTML_TRANSPOSE_OUTPUT_SUFFIX", ".transposed.html"
        )
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("HTML_TRANSPOSE_LOG_LEVEL", "WARNING")
    )

    supported_parsers: List[str] = field(
        default_factory=lambda: list(SUPPORTED_PARSERS)
    )

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.parser not in self.supported_parsers:
            raise ConfigurationError(
                f"unsupported parser {self.parser!r} "
                f"(expected one of {', '.join(self.supported_parsers)})",
                key_name="parser",
            )
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(
                f"unknown log level {self.log_level!r}", key_name="log_level"
            )

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)


# Global configuration instance (singleton)
_config: Optional[TransposeConfig] = None


def get_config() -> TransposeConfig:
    """
    Get the global configuration instance.

    Returns:
        TransposeConfig instance with current settings.
    """
    global _config
    if _config is None:
        _config = TransposeConfig()
    return _config


def reset_config() -> None:
    """Reset configuration to defaults (useful for testing)."""
    global _config
    _config = None
