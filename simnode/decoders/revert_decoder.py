"""Error decoding for transaction reverts."""
import logging
from dataclasses import dataclass
from typing import Union

from eth_abi import decode
from eth_abi.exceptions import DecodingError
from eth_utils import encode_hex, function_signature_to_4byte_selector

from .panic_codes import panic_code_to_error_reason

logger = logging.getLogger(__name__)


# Standard error selectors
ERROR_SELECTOR = function_signature_to_4byte_selector("Error(string)")
PANIC_SELECTOR = function_signature_to_4byte_selector("Panic(uint256)")

SELECTOR_SIZE = 4
MAX_PANIC_CODE = 2**64 - 1

# eth_abi raises OverflowError for lengths and offsets beyond the index range
DECODE_ERRORS = (DecodingError, OverflowError)

VM_EXCEPTION = "VM Exception while processing transaction"
NO_REASON = "Transaction reverted without a reason"


class AbiTypeCheckError(Exception):
    """Revert data does not match any recognized error shape."""

    def __init__(self, output: bytes, detail: str) -> None:
        self.output = output
        self.detail = detail
        super().__init__(f"Type check failed for {encode_hex(output)}: {detail}")


@dataclass(frozen=True)
class CustomError:
    """Error with a selector that is neither Error(string) nor Panic(uint256)."""

    data: bytes

    def __str__(self) -> str:
        return encode_hex(self.data)


@dataclass(frozen=True)
class RevertReason:
    """Error(string) revert."""

    reason: str


@dataclass(frozen=True)
class Panic:
    """Panic(uint256) revert."""

    code: int


ContractError = Union[CustomError, RevertReason, Panic]


def decode_contract_error(output: bytes) -> ContractError:
    """
    Classify revert data as one of the standard Solidity error shapes.

    Decoding is lenient: trailing bytes and non-zero padding after the first
    argument are ignored, and invalid UTF-8 in a reason string is replaced.

    Args:
        output: Raw bytes returned by the reverted call

    Returns:
        CustomError, RevertReason or Panic

    Raises:
        AbiTypeCheckError: the bytes are too short for a selector, or the
            body of a standard error cannot be decoded, including lengths or
            offsets too large to address
    """
    if len(output) < SELECTOR_SIZE:
        raise AbiTypeCheckError(output, "missing selector")

    selector = output[:SELECTOR_SIZE]
    body = output[SELECTOR_SIZE:]

    if selector == ERROR_SELECTOR:
        try:
            (raw_reason,) = decode(["bytes"], body, strict=False)
        except DECODE_ERRORS as e:
            raise AbiTypeCheckError(output, f"Error(string): {e}") from e
        return RevertReason(reason=raw_reason.decode("utf-8", errors="replace"))

    if selector == PANIC_SELECTOR:
        try:
            (code,) = decode(["uint256"], body, strict=False)
        except DECODE_ERRORS as e:
            raise AbiTypeCheckError(output, f"Panic(uint256): {e}") from e
        return Panic(code=code)

    return CustomError(data=output)


def render_revert(output: bytes) -> str:
    """
    Render revert data as a human-readable message.

    Args:
        output: Raw bytes returned by the reverted call

    Returns:
        Revert message
    """
    if not output:
        return NO_REASON

    try:
        error = decode_contract_error(output)
    except AbiTypeCheckError as e:
        logger.debug(f"Falling back to raw revert data: {e.detail}")
        return (
            f"{VM_EXCEPTION}: reverted with an unrecognized custom error "
            f"(return data: {encode_hex(output)})"
        )

    if isinstance(error, RevertReason):
        return f"reverted with reason string '{error.reason}'"

    if isinstance(error, Panic):
        # Compiler-inserted checks only emit small constants
        if error.code > MAX_PANIC_CODE:
            raise AssertionError(f"panic code {error.code} does not fit into u64")
        return (
            f"{VM_EXCEPTION}: reverted with panic code {error.code} "
            f"({panic_code_to_error_reason(error.code)})"
        )

    return (
        f"{VM_EXCEPTION}: reverted with an unrecognized custom error "
        f"(return data: {error})"
    )
