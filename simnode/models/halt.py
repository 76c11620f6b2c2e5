"""Execution halt reasons reported by the EVM."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class HaltKind(str, Enum):
    """Reason the interpreter stopped without returning or reverting."""

    OUT_OF_GAS = "OutOfGas"
    OPCODE_NOT_FOUND = "OpcodeNotFound"
    INVALID_FE_OPCODE = "InvalidFEOpcode"
    INVALID_JUMP = "InvalidJump"
    NOT_ACTIVATED = "NotActivated"
    STACK_UNDERFLOW = "StackUnderflow"
    STACK_OVERFLOW = "StackOverflow"
    OUT_OF_OFFSET = "OutOfOffset"
    CREATE_COLLISION = "CreateCollision"
    PRECOMPILE_ERROR = "PrecompileError"
    NONCE_OVERFLOW = "NonceOverflow"
    CREATE_CONTRACT_SIZE_LIMIT = "CreateContractSizeLimit"
    CREATE_CONTRACT_STARTING_WITH_EF = "CreateContractStartingWithEF"
    CREATE_INITCODE_SIZE_LIMIT = "CreateInitcodeSizeLimit"
    OVERFLOW_PAYMENT = "OverflowPayment"
    STATE_CHANGE_DURING_STATIC_CALL = "StateChangeDuringStaticCall"
    CALL_NOT_ALLOWED_INSIDE_STATIC = "CallNotAllowedInsideStatic"
    OUT_OF_FUND = "OutOfFund"
    CALL_TOO_DEEP = "CallTooDeep"


class OutOfGasError(str, Enum):
    """Which gas check ran out."""

    BASIC = "Basic"
    MEMORY_LIMIT = "MemoryLimit"
    MEMORY = "Memory"
    PRECOMPILE = "Precompile"
    INVALID_OPERAND = "InvalidOperand"


class Halt(BaseModel):
    """Halt value handed over by the execution engine."""

    model_config = ConfigDict(frozen=True)

    kind: HaltKind
    out_of_gas: Optional[OutOfGasError] = None

    @model_validator(mode="after")
    def _check_out_of_gas(self) -> "Halt":
        if self.kind is HaltKind.OUT_OF_GAS and self.out_of_gas is None:
            raise ValueError("OutOfGas halt requires an out_of_gas detail")
        if self.kind is not HaltKind.OUT_OF_GAS and self.out_of_gas is not None:
            raise ValueError(f"{self.kind.value} halt takes no out_of_gas detail")
        return self

    @classmethod
    def out_of_gas_halt(cls, detail: OutOfGasError = OutOfGasError.BASIC) -> "Halt":
        """Create an OutOfGas halt."""
        return cls(kind=HaltKind.OUT_OF_GAS, out_of_gas=detail)

    def __str__(self) -> str:
        if self.out_of_gas is not None:
            return f"{self.kind.value}({self.out_of_gas.value})"
        return self.kind.value
