"""Snowflake decoder."""

from __future__ import annotations

from collections.abc import Iterable

from dflake.exceptions import ParseError, ParseErrorKind
from dflake.models import DISCORD_EPOCH, MAX_DIGITS, U64_MAX, Dflake


# str.isspace() also matches these separators, which are not Unicode White_Space.
_NON_WHITESPACE_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def _is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in _NON_WHITESPACE_SEPARATORS


def _parse_u64(text: str) -> int:
    """Parse an unsigned 64-bit integer from ASCII decimal digits.

    Raises:
        ValueError: If the text is empty, has non-ASCII digits or overflows
    """
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not (text.isascii() and text.isdigit()):
        raise ValueError("invalid digit found in string")

    value = int(text)
    if value > U64_MAX:
        raise ValueError("number too large to fit in target type")
    return value


class SnowflakeDecoder:
    """Snowflake decoder bound to an epoch."""

    def __init__(self, epoch: int = DISCORD_EPOCH):
        """Initialize decoder.

        Args:
            epoch: Milliseconds added to the shifted timestamp (default: Discord epoch)
        """
        self.epoch = epoch

    def decode_int(self, value: int) -> Dflake:
        """Decode a 64-bit unsigned integer.

        Every value in 0..2**64-1 decodes, including 0.

        Args:
            value: Raw snowflake

        Returns:
            Decoded snowflake

        Raises:
            TypeError: If value is not an int
            ParseError: If value is outside the 64-bit unsigned range
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        if value < 0:
            raise ParseError(ParseErrorKind.TOO_SMALL)
        if value > U64_MAX:
            raise ParseError(ParseErrorKind.TOO_LARGE)

        return Dflake.from_raw(value, self.epoch)

    def decode_str(self, text: str) -> Dflake:
        """Decode a snowflake from its decimal string form.

        Checks run in order and the first failure wins: whitespace,
        non-numeric characters, length, integer parse.

        Args:
            text: Decimal snowflake string

        Returns:
            Decoded snowflake

        Raises:
            ParseError: If the string is not a valid snowflake
        """
        if any(_is_whitespace(ch) for ch in text):
            raise ParseError(ParseErrorKind.CONTAINS_WHITESPACE)

        if any(not ch.isnumeric() for ch in text):
            raise ParseError(ParseErrorKind.INVALID_CHAR)

        if len(text) > MAX_DIGITS:
            raise ParseError(ParseErrorKind.TOO_LARGE)

        try:
            value = _parse_u64(text)
        except ValueError as e:
            raise ParseError(ParseErrorKind.PARSE_INT_ERROR, cause=e) from e

        return self.decode_int(value)

    def decode(self, value: int | str) -> Dflake:
        """Decode a snowflake given as int or str."""
        if isinstance(value, str):
            return self.decode_str(value)
        return self.decode_int(value)

    def decode_many(self, values: Iterable[int | str]) -> list[Dflake]:
        """Decode several snowflakes, stopping at the first invalid one."""
        return [self.decode(value) for value in values]


_default_decoder = SnowflakeDecoder()


def parse(value: int) -> Dflake:
    """Parse an integer into a Dflake using the Discord epoch."""
    return _default_decoder.decode_int(value)


def parse_str(text: str) -> Dflake:
    """Parse a string into a Dflake using the Discord epoch."""
    return _default_decoder.decode_str(text)
