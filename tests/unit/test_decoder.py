"""Tests for snowflake decoding."""

import random

import pytest
from dflake import (
    DISCORD_EPOCH,
    U64_MAX,
    ParseError,
    ParseErrorKind,
    SnowflakeDecoder,
    parse,
    parse_str,
)


class TestParse:
    """Tests for parse()."""

    def test_documented_example(self) -> None:
        """Test decoding the documented example value."""
        flake = parse(3971046231244935168)

        assert (flake.timestamp, flake.worker_id, flake.process_id, flake.increment) == (
            2366841600000,
            1,
            1,
            0,
        )

    def test_raw_round_trip(self) -> None:
        """Test that raw is preserved for sampled values."""
        rng = random.Random(1420070400000)
        values = [0, 1, U64_MAX] + [rng.getrandbits(64) for _ in range(200)]

        for value in values:
            assert parse(value).raw == value

    def test_deterministic(self) -> None:
        """Test that decoding twice gives identical results."""
        rng = random.Random(42)

        for _ in range(100):
            value = rng.getrandbits(64)
            assert parse(value) == parse(value)

    def test_field_ranges(self) -> None:
        """Test that fields stay inside their bit widths."""
        rng = random.Random(7)

        for _ in range(200):
            flake = parse(rng.getrandbits(64))
            assert 0 <= flake.worker_id <= 31
            assert 0 <= flake.process_id <= 31
            assert 0 <= flake.increment <= 4095

    def test_zero_decodes(self) -> None:
        """Test that zero is accepted."""
        assert parse(0).timestamp == DISCORD_EPOCH

    def test_max_decodes(self) -> None:
        """Test that the largest 64-bit value is accepted."""
        assert parse(U64_MAX).increment == 4095

    def test_negative_is_too_small(self) -> None:
        """Test that negative integers are rejected."""
        with pytest.raises(ParseError) as exc_info:
            parse(-1)

        assert exc_info.value.kind is ParseErrorKind.TOO_SMALL

    def test_above_u64_is_too_large(self) -> None:
        """Test that integers above 64 bits are rejected."""
        with pytest.raises(ParseError) as exc_info:
            parse(U64_MAX + 1)

        assert exc_info.value.kind is ParseErrorKind.TOO_LARGE

    @pytest.mark.parametrize("value", ["123", 1.5, None, True])
    def test_non_int_rejected(self, value: object) -> None:
        """Test that non-int values raise TypeError."""
        with pytest.raises(TypeError, match="Expected int"):
            parse(value)  # type: ignore[arg-type]


class TestParseStr:
    """Tests for parse_str()."""

    def test_valid_string(self) -> None:
        """Test decoding a valid snowflake string."""
        assert parse_str("3971046231244935168") == parse(3971046231244935168)

    @pytest.mark.parametrize("text", [" 123", "12 3", "123\n", "\t123", "12\u20033"])
    def test_whitespace(self, text: str) -> None:
        """Test that whitespace anywhere is rejected."""
        with pytest.raises(ParseError) as exc_info:
            parse_str(text)

        assert exc_info.value.kind is ParseErrorKind.CONTAINS_WHITESPACE

    @pytest.mark.parametrize("text", ["12a3", "-123", "+123", "12.3", "0x1F", "1_000"])
    def test_invalid_char(self, text: str) -> None:
        """Test that non-numeric characters are rejected."""
        with pytest.raises(ParseError) as exc_info:
            parse_str(text)

        assert exc_info.value.kind is ParseErrorKind.INVALID_CHAR

    @pytest.mark.parametrize("text", ["1\x1c2", "1\x1d2", "1\x1e2", "1\x1f2"])
    def test_information_separators_are_not_whitespace(self, text: str) -> None:
        """Test that U+001C..U+001F are reported as invalid characters."""
        with pytest.raises(ParseError) as exc_info:
            parse_str(text)

        assert exc_info.value.kind is ParseErrorKind.INVALID_CHAR

    @pytest.mark.parametrize("text", ["1\u00a02", "1\u20282", "1\u30002", "1\x852"])
    def test_unicode_whitespace(self, text: str) -> None:
        """Test that Unicode White_Space characters are reported as whitespace."""
        with pytest.raises(ParseError) as exc_info:
            parse_str(text)

        assert exc_info.value.kind is ParseErrorKind.CONTAINS_WHITESPACE

    def test_too_large(self) -> None:
        """Test that more than 20 digits is rejected before parsing."""
        with pytest.raises(ParseError) as exc_info:
            parse_str("1" * 21)

        assert exc_info.value.kind is ParseErrorKind.TOO_LARGE

    def test_twenty_digits_in_range(self) -> None:
        """Test that the largest 64-bit value parses."""
        flake = parse_str("18446744073709551615")

        assert flake.raw == U64_MAX

    def test_twenty_digits_overflow(self) -> None:
        """Test that 20 digits above the 64-bit maximum fail integer parsing."""
        with pytest.raises(ParseError) as exc_info:
            parse_str("18446744073709551616")

        assert exc_info.value.kind is ParseErrorKind.PARSE_INT_ERROR
        assert isinstance(exc_info.value.cause, ValueError)
        assert "too large" in str(exc_info.value.cause)

    def test_empty_string(self) -> None:
        """Test that the empty string fails at integer parsing."""
        with pytest.raises(ParseError) as exc_info:
            parse_str("")

        assert exc_info.value.kind is ParseErrorKind.PARSE_INT_ERROR
        assert "empty" in str(exc_info.value)

    @pytest.mark.parametrize("text", ["²", "٣", "12½"])
    def test_non_ascii_numeric(self, text: str) -> None:
        """Test that numeric non-ASCII characters pass the char check but fail parsing."""
        with pytest.raises(ParseError) as exc_info:
            parse_str(text)

        assert exc_info.value.kind is ParseErrorKind.PARSE_INT_ERROR
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_whitespace_checked_before_length(self) -> None:
        """Test that a long string with whitespace reports whitespace."""
        with pytest.raises(ParseError) as exc_info:
            parse_str("1" * 30 + " ")

        assert exc_info.value.kind is ParseErrorKind.CONTAINS_WHITESPACE

    def test_whitespace_checked_before_chars(self) -> None:
        """Test that whitespace wins over invalid characters."""
        with pytest.raises(ParseError) as exc_info:
            parse_str("abc def")

        assert exc_info.value.kind is ParseErrorKind.CONTAINS_WHITESPACE

    def test_chars_checked_before_length(self) -> None:
        """Test that a long string with letters reports invalid characters."""
        with pytest.raises(ParseError) as exc_info:
            parse_str("1" * 30 + "a")

        assert exc_info.value.kind is ParseErrorKind.INVALID_CHAR

    def test_leading_zeros(self) -> None:
        """Test that leading zeros are accepted within 20 characters."""
        assert parse_str("00000000000000000042").raw == 42


class TestSnowflakeDecoder:
    """Tests for SnowflakeDecoder."""

    def test_default_epoch(self) -> None:
        """Test that the default epoch is the Discord epoch."""
        assert SnowflakeDecoder().epoch == DISCORD_EPOCH

    def test_custom_epoch(self) -> None:
        """Test decoding with a different epoch."""
        twitter_epoch = 1288834974657
        decoder = SnowflakeDecoder(epoch=twitter_epoch)

        flake = decoder.decode_int(3971046231244935168)

        assert flake.timestamp == 2366841600000 - DISCORD_EPOCH + twitter_epoch
        assert flake.worker_id == 1

    def test_decode_dispatches_on_type(self) -> None:
        """Test that decode() accepts int and str."""
        decoder = SnowflakeDecoder()

        assert decoder.decode("175928847299117063") == decoder.decode(175928847299117063)

    def test_decode_many(self) -> None:
        """Test decoding several values in order."""
        decoder = SnowflakeDecoder()

        flakes = decoder.decode_many([175928847299117063, "3971046231244935168"])

        assert [flake.raw for flake in flakes] == [175928847299117063, 3971046231244935168]

    def test_decode_many_stops_on_error(self) -> None:
        """Test that decode_many raises on the first invalid value."""
        decoder = SnowflakeDecoder()

        with pytest.raises(ParseError) as exc_info:
            decoder.decode_many(["1", "x", " "])

        assert exc_info.value.kind is ParseErrorKind.INVALID_CHAR
