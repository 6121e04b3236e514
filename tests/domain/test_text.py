"""Tests for the decimal/hex text grammar."""

import pytest

from bigutil.domain.errors import NegativeValueError, OverlengthValueError, ParseError
from bigutil.domain.text import has_hex_prefix, parse_decimal, parse_hex, parse_text, render
from bigutil.domain.types import Base
from tests.conftest import MAX_DECIMAL, OVER_DECIMAL, OVER_HEX


class TestParseDecimal:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("0", 0),
            ("7", 7),
            ("2083236893", 2083236893),
            ("000123", 123),
            (MAX_DECIMAL, 2**256 - 1),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_decimal(text) == expected

    @pytest.mark.parametrize("text", ["-1", "-0", "-2083236893"])
    def test_negative_rejected(self, text: str) -> None:
        with pytest.raises(NegativeValueError):
            parse_decimal(text)

    @pytest.mark.parametrize(
        "text",
        ["", "-", "+1", " 1", "1 ", "1_000", "12a", "0x10", "1.5", "١", "1\n"],
    )
    def test_malformed_rejected(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_decimal(text)

    def test_one_past_max_rejected(self) -> None:
        with pytest.raises(OverlengthValueError):
            parse_decimal(OVER_DECIMAL)

    def test_huge_digit_run_rejected_without_conversion(self) -> None:
        with pytest.raises(OverlengthValueError):
            parse_decimal("9" * 10_000)

    def test_leading_zeros_do_not_count_toward_bound(self) -> None:
        assert parse_decimal("0" * 10_000 + "1") == 1


class TestParseHex:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("0x0", 0),
            ("0x00", 0),
            ("0x7c2bac1d", 2083236893),
            ("0x7C2BAC1D", 2083236893),
            ("0xabc", 0xABC),
            ("0x" + "f" * 64, 2**256 - 1),
            ("0x00" + "f" * 64, 2**256 - 1),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_hex(text) == expected

    @pytest.mark.parametrize("text", ["7c2bac1d", "0X7c2bac1d", "x7c", "", "2083236893"])
    def test_missing_prefix_rejected(self, text: str) -> None:
        with pytest.raises(ParseError, match="invalid hex string"):
            parse_hex(text)

    @pytest.mark.parametrize("text", ["0x", "0xg1", "0x-1", "0x 1", "0x1_0", "0x0x1"])
    def test_malformed_digits_rejected(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_hex(text)

    def test_one_past_max_rejected(self) -> None:
        with pytest.raises(OverlengthValueError):
            parse_hex(OVER_HEX)


class TestParseText:
    def test_dispatches_to_hex(self) -> None:
        assert parse_text("0x7c2bac1d") == (2083236893, Base.HEXADECIMAL)

    def test_dispatches_to_decimal(self) -> None:
        assert parse_text("2083236893") == (2083236893, Base.DECIMAL)

    def test_unprefixed_hex_digits_are_decimal(self) -> None:
        with pytest.raises(ParseError):
            parse_text("7c2bac1d")

    def test_has_hex_prefix_is_case_sensitive(self) -> None:
        assert has_hex_prefix("0x1")
        assert not has_hex_prefix("0X1")

    @pytest.mark.parametrize("parse", [parse_text, parse_decimal, parse_hex])
    @pytest.mark.parametrize("value", [42, None, b"42"])
    def test_non_str_rejected(self, parse: object, value: object) -> None:
        with pytest.raises(TypeError, match="must be str"):
            parse(value)  # type: ignore[operator]


class TestRender:
    def test_zero_hex_is_0x0(self) -> None:
        assert render(0, Base.HEXADECIMAL) == "0x0"

    def test_zero_decimal(self) -> None:
        assert render(0, Base.DECIMAL) == "0"

    def test_hex_is_lowercase(self) -> None:
        assert render(0x7C2BAC1D, Base.HEXADECIMAL) == "0x7c2bac1d"

    def test_plain_int_base_accepted(self) -> None:
        assert render(255, 10) == "255"  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [0, 1, 255, 256, 2083236893, 2**128 + 7, 2**256 - 1])
    def test_inverse_of_parse(self, value: int) -> None:
        assert parse_decimal(render(value, Base.DECIMAL)) == value
        assert parse_hex(render(value, Base.HEXADECIMAL)) == value
