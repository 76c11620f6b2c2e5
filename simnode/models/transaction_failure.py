"""Failed transaction model returned as JSON-RPC error data."""
from typing import Any, Optional, Union

from eth_utils import decode_hex, encode_hex
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_serializer

from ..decoders.revert_decoder import VM_EXCEPTION, render_revert
from .halt import Halt, HaltKind, OutOfGasError

HASH_SIZE = 32


# Reasons serialize externally tagged: unit variants as a bare string,
# variants with a payload as a single-key object.
class Inner(BaseModel):
    """Halt passed through unchanged."""

    model_config = ConfigDict(frozen=True)

    halt: Halt

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        if self.halt.out_of_gas is not None:
            return {"Inner": {self.halt.kind.value: self.halt.out_of_gas.value}}
        return {"Inner": self.halt.kind.value}


class OpcodeNotFound(BaseModel):
    """Invalid or undefined opcode."""

    model_config = ConfigDict(frozen=True)

    @model_serializer
    def _serialize(self) -> str:
        return "OpcodeNotFound"


class OutOfGas(BaseModel):
    model_config = ConfigDict(frozen=True)

    detail: OutOfGasError

    @model_serializer
    def _serialize(self) -> dict[str, str]:
        return {"OutOfGas": self.detail.value}


class Revert(BaseModel):
    """Revert carrying the exact bytes returned by the call."""

    model_config = ConfigDict(frozen=True)

    output: bytes

    @model_serializer
    def _serialize(self) -> dict[str, str]:
        return {"Revert": encode_hex(self.output)}


FailureReason = Union[Inner, OpcodeNotFound, OutOfGas, Revert]


class TransactionFailure(BaseModel):
    """
    Reverted or halted transaction.

    The display form follows the wording of the reference client, so that
    tooling matching on error messages keeps working.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    reason: FailureReason
    data: Optional[str] = None
    transaction_hash: bytes = Field(alias="transactionHash")

    @field_validator("transaction_hash", mode="before")
    @classmethod
    def _parse_hash(cls, value: Any) -> Any:
        if isinstance(value, str):
            return decode_hex(value)
        return value

    @field_validator("transaction_hash")
    @classmethod
    def _check_hash_size(cls, value: bytes) -> bytes:
        if len(value) != HASH_SIZE:
            raise ValueError(f"transaction hash must be {HASH_SIZE} bytes, got {len(value)}")
        return value

    @field_serializer("reason")
    def _serialize_reason(self, value: FailureReason) -> Any:
        # Serialize through the member's own tagged form
        return value.model_dump(mode="json")

    @field_serializer("transaction_hash")
    def _serialize_hash(self, value: bytes) -> str:
        return encode_hex(value)

    @classmethod
    def from_revert(cls, output: bytes, transaction_hash: Union[bytes, str]) -> "TransactionFailure":
        """Create a failure for a call that reverted with `output`."""
        output = bytes(output)
        return cls(
            reason=Revert(output=output),
            data=encode_hex(output),
            transaction_hash=transaction_hash,
        )

    @classmethod
    def from_halt(cls, halt: Halt, transaction_hash: Union[bytes, str]) -> "TransactionFailure":
        """Create a failure for a call that halted."""
        if halt.kind in (HaltKind.OPCODE_NOT_FOUND, HaltKind.INVALID_FE_OPCODE):
            reason: FailureReason = OpcodeNotFound()
        elif halt.kind is HaltKind.OUT_OF_GAS:
            reason = OutOfGas(detail=halt.out_of_gas)
        else:
            reason = Inner(halt=halt)

        return cls(reason=reason, data=None, transaction_hash=transaction_hash)

    def to_json(self) -> dict[str, Any]:
        """Structured form used as JSON-RPC error data."""
        return self.model_dump(mode="json", by_alias=True)

    def __str__(self) -> str:
        reason = self.reason
        if isinstance(reason, Inner):
            return str(reason.halt)
        if isinstance(reason, OpcodeNotFound):
            return f"{VM_EXCEPTION}: invalid opcode"
        if isinstance(reason, OutOfGas):
            return "out of gas"
        return render_revert(reason.output)
