"""Provider error causes reported to JSON-RPC clients."""
from typing import Any, Optional, Union

from eth_utils import to_checksum_address

from ..models.chain import BlockSpec, SpecId, SubscriptionType
from ..models.jsonrpc import INVALID_PARAMS, SERVER_ERROR
from ..models.transaction_failure import TransactionFailure


class ProviderError(Exception):
    """
    Base class for every failure the provider reports.

    Each subclass is one cause. It renders a fixed message template and
    carries a fixed JSON-RPC code.
    """

    code: int = SERVER_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def jsonrpc_data(self) -> Optional[Any]:
        """Structured `data` member of the JSON-RPC error, if any."""
        return None


class WrappedError(ProviderError):
    """Lower-level error surfaced unchanged."""

    template = "{error}"

    def __init__(self, error: BaseException) -> None:
        self.error = error
        super().__init__(self.template.format(error=error))
        self.__cause__ = error


# Upstream failures

class AccountOverrideConversionError(WrappedError):
    """Account override in eth_call could not be converted."""


class BlockchainError(WrappedError):
    pass


class CreationError(WrappedError):
    """Provider data could not be created."""


class MemPoolUpdate(WrappedError):
    """State error while updating the mem pool."""


class MineBlock(WrappedError):
    pass


class MinerTransactionError(WrappedError):
    """Pending transaction could not be added to the mem pool."""


class RlpDecodeError(WrappedError):
    pass


class RunTransaction(WrappedError):
    """Error while running a transaction."""


class Serialization(WrappedError):
    template = "Failed to serialize response: {error}"


class SignatureError(WrappedError):
    """Signature could not be recovered."""


class StateError(WrappedError):
    pass


class SystemTimeError(WrappedError):
    pass


class TransactionCreationError(WrappedError):
    """Pending transaction could not be created."""


class TryFromIntError(WrappedError):
    template = "Could not convert the integer argument, due to: {error}"


# Automining checks

class AutoMineGasPriceTooLow(ProviderError):
    """Gas price is below the next block's base fee while automining."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Transaction gasPrice ({actual}) is too low for the next block, "
            f"which has a baseFeePerGas of {expected}"
        )


class AutoMineMaxFeeTooLow(ProviderError):
    """Max fee is below the next block's base fee while automining."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Transaction maxFeePerGas ({actual}) is too low for the next block, "
            f"which has a baseFeePerGas of {expected}"
        )


class AutoMinePriorityFeeTooLow(ProviderError):
    """Priority fee is below the minimum gas price while automining."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Transaction gas price is {actual}, which is below the minimum of {expected}")


class AutoMineNonceTooHigh(ProviderError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Nonce too high. Expected nonce to be {expected} but got {actual}. "
            "Note that transactions can't be queued when automining."
        )


class AutoMineNonceTooLow(ProviderError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Nonce too low. Expected nonce to be {expected} but got {actual}. "
            "Note that transactions can't be queued when automining."
        )


# Request validation

class InvalidBlockNumberOrHash(ProviderError):
    """Block number or hash doesn't exist in the blockchain."""

    def __init__(self, block_spec: BlockSpec, latest_block_number: int) -> None:
        self.block_spec = block_spec
        self.latest_block_number = latest_block_number
        super().__init__(
            f"Received invalid block tag {block_spec}. "
            f"Latest block number is {latest_block_number}"
        )


class InvalidBlockTag(ProviderError):
    """Block tag is not allowed in pre-merge hardforks."""

    def __init__(self, block_spec: BlockSpec, spec: SpecId) -> None:
        self.block_spec = block_spec
        self.spec = spec
        super().__init__(
            f"The '{block_spec}' block tag is not allowed in pre-merge hardforks. "
            f"You are using the '{spec.name}' hardfork."
        )


class InvalidChainId(ProviderError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        # The dollar signs are part of the reference client's wording
        super().__init__(f"Invalid chainId ${actual} provided, expected ${expected} instead.")


class InvalidFilterSubscriptionType(ProviderError):
    def __init__(self, filter_id: int, expected: SubscriptionType, actual: SubscriptionType) -> None:
        self.filter_id = filter_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Subscription {filter_id} is not a {expected.value} subscription, "
            f"but a {actual.value} subscription"
        )


class InvalidTransactionIndex(ProviderError):
    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Transaction index '{index}' is too large")


class InvalidTransactionInput(ProviderError):
    """Transaction request is malformed."""


class RpcVersion(ProviderError):
    """Unsupported JSON-RPC version."""

    def __init__(self, version: Optional[str]) -> None:
        self.version = version
        # A missing version renders as a JSON null
        rendered = "null" if version is None else f'"{version}"'
        super().__init__(f"unsupported JSON-RPC version: {rendered}")


class SetMinGasPriceUnsupported(ProviderError):
    def __init__(self) -> None:
        super().__init__("hardhat_setMinGasPrice is not supported when EIP-1559 is active")


class TimestampLowerThanPrevious(ProviderError):
    def __init__(self, proposed: int, previous: int) -> None:
        self.proposed = proposed
        self.previous = previous
        super().__init__(f"Timestamp {proposed} is lower than the previous block's timestamp {previous}")


class TimestampEqualsPrevious(ProviderError):
    def __init__(self, proposed: int) -> None:
        self.proposed = proposed
        super().__init__(
            f"Timestamp {proposed} is equal to the previous block's timestamp. "
            "Enable the 'allowBlocksWithSameTimestamp' option to allow this"
        )


class Unimplemented(ProviderError):
    """The request hasn't been implemented yet."""

    def __init__(self, what: str) -> None:
        self.what = what
        super().__init__(f"Unimplemented: {what}")


class UnknownAddress(ProviderError):
    """The address is not owned by this node."""

    def __init__(self, address: Union[str, bytes]) -> None:
        self.address = to_checksum_address(address)
        super().__init__(f"Unknown account {self.address}")


class UnmetHardfork(ProviderError):
    """Minimum required hardfork not met."""

    # The client asked for a feature of a later hardfork, not a server fault
    code = INVALID_PARAMS

    def __init__(self, actual: SpecId, minimum: SpecId) -> None:
        self.actual = actual
        self.minimum = minimum
        super().__init__(
            f"Feature is only available in post-{minimum.name} hardforks, "
            f"the current hardfork is {actual.name}"
        )


# Execution results

class TransactionFailed(ProviderError):
    """Transaction reverted or halted and the provider bails on failures."""

    def __init__(self, failure: TransactionFailure) -> None:
        self.failure = failure
        super().__init__(str(failure))

    def jsonrpc_data(self) -> dict[str, Any]:
        return self.failure.to_json()


PROVIDER_ERRORS = (
    AccountOverrideConversionError,
    AutoMineGasPriceTooLow,
    AutoMineMaxFeeTooLow,
    AutoMinePriorityFeeTooLow,
    AutoMineNonceTooHigh,
    AutoMineNonceTooLow,
    BlockchainError,
    CreationError,
    InvalidBlockNumberOrHash,
    InvalidBlockTag,
    InvalidChainId,
    InvalidFilterSubscriptionType,
    InvalidTransactionIndex,
    InvalidTransactionInput,
    MemPoolUpdate,
    MineBlock,
    MinerTransactionError,
    RlpDecodeError,
    RpcVersion,
    RunTransaction,
    SetMinGasPriceUnsupported,
    Serialization,
    SignatureError,
    StateError,
    SystemTimeError,
    TimestampLowerThanPrevious,
    TimestampEqualsPrevious,
    TransactionCreationError,
    TransactionFailed,
    TryFromIntError,
    Unimplemented,
    UnknownAddress,
    UnmetHardfork,
)
