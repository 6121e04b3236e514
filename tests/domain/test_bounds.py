"""Tests for bound constants and magnitude checks."""

import pytest

from bigutil.domain.bounds import MAX_BIT_LENGTH, MAX_BYTE_LENGTH, MAX_VALUE, check_magnitude
from bigutil.domain.errors import NegativeValueError, OverlengthValueError


class TestConstants:
    def test_values(self) -> None:
        assert MAX_BYTE_LENGTH == 32
        assert MAX_BIT_LENGTH == 256
        assert MAX_VALUE == 2**256 - 1


class TestCheckMagnitude:
    @pytest.mark.parametrize("value", [0, 1, MAX_VALUE])
    def test_in_bounds_returned_unchanged(self, value: int) -> None:
        assert check_magnitude(value) == value

    def test_negative(self) -> None:
        with pytest.raises(NegativeValueError):
            check_magnitude(-1)

    def test_overlength(self) -> None:
        with pytest.raises(OverlengthValueError):
            check_magnitude(MAX_VALUE + 1)
