"""Tests for panic_codes.py"""
import pytest

from .panic_codes import PANIC_CODES, UNKNOWN_PANIC_CODE, panic_code_to_error_reason


class TestPanicCodeToErrorReason:
    """Tests for panic_code_to_error_reason."""

    @pytest.mark.parametrize(
        "code, reason",
        [
            (0x01, "Assertion error"),
            (0x11, "Arithmetic operation underflowed or overflowed outside of an unchecked block"),
            (0x12, "Division or modulo division by zero"),
            (0x21, "Tried to convert a value into an enum, but the value was too big or negative"),
            (0x22, "Incorrectly encoded storage byte array"),
            (0x31, ".pop() was called on an empty array"),
            (0x32, "Array accessed at an out-of-bounds or negative index"),
            (0x41, "Too much memory was allocated, or an array was created that is too large"),
            (0x51, "Called a zero-initialized variable of internal function type"),
        ],
    )
    def test_known_codes(self, code, reason):
        """Every code emitted by the compiler has its own text."""
        assert panic_code_to_error_reason(code) == reason

    @pytest.mark.parametrize("code", [0x00, 0x02, 0x99, 2**64 - 1])
    def test_unknown_codes(self, code):
        """Anything else gets the generic text."""
        assert panic_code_to_error_reason(code) == UNKNOWN_PANIC_CODE

    def test_table_size(self):
        assert len(PANIC_CODES) == 9
