"""
Domain-specific exceptions for html-transpose.

Provides fine-grained exception types so callers can tell a missing
table apart from a broken structural query.
"""

from typing import Optional


class HtmlTransposeError(Exception):
    """Base exception for all html-transpose errors."""

    pass


# ============================================================================
# Parsing Exceptions
# ============================================================================


class ParsingError(HtmlTransposeError):
    """Base exception for parsing-related errors."""

    pass


class TableNotFoundError(ParsingError):
    """The parsed document contains no <table> element."""

    def __init__(self, message: str = "No <table> element found"):
        super().__init__(message)


class SelectorError(ParsingError):
    """A structural CSS selector failed to compile."""

    def __init__(self, selector: str, reason: str):
        self.selector = selector
        self.reason = reason
        super().__init__(f"Failed to parse {selector!r} selector: {reason}")


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(HtmlTransposeError):
    """Configuration-related error."""

    def __init__(self, message: str, key_name: Optional[str] = None):
        self.key_name = key_name
        if key_name:
            message = f"{key_name}: {message}"
        super().__init__(message)
