"""Provider error taxonomy and its JSON-RPC mapping."""
from .mapper import to_jsonrpc_error
from .provider_error import (
    PROVIDER_ERRORS,
    AccountOverrideConversionError,
    AutoMineGasPriceTooLow,
    AutoMineMaxFeeTooLow,
    AutoMineNonceTooHigh,
    AutoMineNonceTooLow,
    AutoMinePriorityFeeTooLow,
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
    ProviderError,
    RlpDecodeError,
    RpcVersion,
    RunTransaction,
    Serialization,
    SetMinGasPriceUnsupported,
    SignatureError,
    StateError,
    SystemTimeError,
    TimestampEqualsPrevious,
    TimestampLowerThanPrevious,
    TransactionCreationError,
    TransactionFailed,
    TryFromIntError,
    Unimplemented,
    UnknownAddress,
    UnmetHardfork,
    WrappedError,
)
