"""Solidity panic codes."""

# Codes emitted by compiler-inserted checks, see the Solidity docs on Panic(uint256)
PANIC_CODES = {
    0x01: "Assertion error",
    0x11: "Arithmetic operation underflowed or overflowed outside of an unchecked block",
    0x12: "Division or modulo division by zero",
    0x21: "Tried to convert a value into an enum, but the value was too big or negative",
    0x22: "Incorrectly encoded storage byte array",
    0x31: ".pop() was called on an empty array",
    0x32: "Array accessed at an out-of-bounds or negative index",
    0x41: "Too much memory was allocated, or an array was created that is too large",
    0x51: "Called a zero-initialized variable of internal function type",
}

UNKNOWN_PANIC_CODE = "Unknown panic code"


def panic_code_to_error_reason(code: int) -> str:
    """Describe a panic code, falling back to a generic text."""
    return PANIC_CODES.get(code, UNKNOWN_PANIC_CODE)
