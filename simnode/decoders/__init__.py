"""Decoders for contract revert data."""
from .panic_codes import PANIC_CODES, panic_code_to_error_reason
from .revert_decoder import (
    AbiTypeCheckError,
    CustomError,
    Panic,
    RevertReason,
    decode_contract_error,
    render_revert,
)
