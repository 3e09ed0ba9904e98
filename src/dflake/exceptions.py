"""Exceptions raised while decoding snowflakes."""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """Things that can go wrong while parsing a snowflake."""

    TOO_SMALL = "The input is too small."
    TOO_LARGE = "The input is too large."
    CONTAINS_WHITESPACE = "The input contains whitespace."
    INVALID_CHAR = "The input contains an invalid character."
    PARSE_INT_ERROR = "Failed to parse as an integer"

    @property
    def message(self) -> str:
        return self.value


class DflakeError(Exception):
    """Base exception for dflake errors."""

    pass


class ParseError(DflakeError, ValueError):
    """Input could not be decoded into a snowflake.

    Attributes:
        kind: Which check rejected the input
        cause: Underlying integer parse failure (PARSE_INT_ERROR only)
    """

    def __init__(self, kind: ParseErrorKind, cause: Exception | None = None):
        self.kind = kind
        self.cause = cause
        if kind is ParseErrorKind.PARSE_INT_ERROR:
            message = f"{kind.message}: {cause}"
        else:
            message = kind.message
        super().__init__(message)
