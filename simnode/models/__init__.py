"""Value models shared by the error layer."""
from .chain import BlockSpec, BlockTag, SpecId, SubscriptionType
from .halt import Halt, HaltKind, OutOfGasError
from .jsonrpc import JsonRpcError, JsonRpcErrorResponse
from .transaction_failure import (
    FailureReason,
    Inner,
    OpcodeNotFound,
    OutOfGas,
    Revert,
    TransactionFailure,
)
