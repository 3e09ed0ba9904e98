"""
dflake - Discord Snowflake Parsing Library

Decodes 64-bit Discord snowflakes into their timestamp, worker ID, process ID
and increment fields. Calendar conversion lives in dflake.datetime_support.

Example:
    >>> import dflake
    >>> flake = dflake.parse(3971046231244935168)
    >>> flake.process_id
    1
"""

from dflake.decoder import SnowflakeDecoder, parse, parse_str
from dflake.exceptions import DflakeError, ParseError, ParseErrorKind
from dflake.models import DISCORD_EPOCH, U64_MAX, Dflake
from dflake.validator import SnowflakeValidator, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "DISCORD_EPOCH",
    "U64_MAX",
    "Dflake",
    "DflakeError",
    "ParseError",
    "ParseErrorKind",
    "SnowflakeDecoder",
    "SnowflakeValidator",
    "ValidationResult",
    "parse",
    "parse_str",
]
