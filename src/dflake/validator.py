"""Snowflake validator."""

from dataclasses import dataclass

from dflake.decoder import SnowflakeDecoder
from dflake.exceptions import ParseError, ParseErrorKind


@dataclass
class ValidationResult:
    """Snowflake validation result."""

    valid: bool
    error: str | None = None
    kind: ParseErrorKind | None = None


class SnowflakeValidator:
    """Validate snowflake strings without raising."""

    def __init__(self, decoder: SnowflakeDecoder | None = None):
        """Initialize validator.

        Args:
            decoder: Decoder to validate with (default: Discord epoch decoder)
        """
        self.decoder = decoder or SnowflakeDecoder()

    def validate(self, text: str) -> ValidationResult:
        """Validate a snowflake string.

        Args:
            text: Snowflake string to validate

        Returns:
            Validation result
        """
        try:
            self.decoder.decode_str(text)
        except ParseError as e:
            return ValidationResult(valid=False, error=str(e), kind=e.kind)

        return ValidationResult(valid=True)
