"""Request and mining checks that raise provider errors."""
from typing import Iterable, Optional

from .config import ProviderConfig, config
from .errors.provider_error import (
    AutoMineGasPriceTooLow,
    AutoMineMaxFeeTooLow,
    AutoMineNonceTooHigh,
    AutoMineNonceTooLow,
    AutoMinePriorityFeeTooLow,
    InvalidBlockNumberOrHash,
    InvalidBlockTag,
    InvalidChainId,
    InvalidFilterSubscriptionType,
    InvalidTransactionIndex,
    RpcVersion,
    TimestampEqualsPrevious,
    TimestampLowerThanPrevious,
    TransactionFailed,
    UnknownAddress,
    UnmetHardfork,
)
from .models.chain import BlockSpec, BlockTag, SpecId, SubscriptionType
from .models.transaction_failure import TransactionFailure

JSONRPC_VERSION = "2.0"

# Tags that only exist once the beacon chain finalizes blocks
POST_MERGE_TAGS = (BlockTag.SAFE, BlockTag.FINALIZED)


def check_chain_id(expected: int, actual: int) -> None:
    """Check a signed transaction's chain id against the node's."""
    if actual != expected:
        raise InvalidChainId(expected=expected, actual=actual)


def check_automine_nonce(expected: int, actual: int) -> None:
    """
    Check a transaction nonce while automining.

    Transactions can't be queued when every transaction is mined right away,
    so the nonce has to match the sender's next nonce exactly.
    """
    if actual < expected:
        raise AutoMineNonceTooLow(expected=expected, actual=actual)
    if actual > expected:
        raise AutoMineNonceTooHigh(expected=expected, actual=actual)


def check_automine_gas_price(base_fee: int, gas_price: int) -> None:
    if gas_price < base_fee:
        raise AutoMineGasPriceTooLow(expected=base_fee, actual=gas_price)


def check_automine_max_fee(base_fee: int, max_fee_per_gas: int) -> None:
    if max_fee_per_gas < base_fee:
        raise AutoMineMaxFeeTooLow(expected=base_fee, actual=max_fee_per_gas)


def check_automine_priority_fee(min_gas_price: int, max_priority_fee_per_gas: int) -> None:
    if max_priority_fee_per_gas < min_gas_price:
        raise AutoMinePriorityFeeTooLow(expected=min_gas_price, actual=max_priority_fee_per_gas)


def check_next_timestamp(
    proposed: int,
    previous: int,
    allow_same: Optional[bool] = None,
) -> None:
    """
    Check the timestamp proposed for the next block.

    Args:
        proposed: Timestamp requested for the new block
        previous: Timestamp of the current head
        allow_same: Accept equal timestamps, defaults to the configured option
    """
    if allow_same is None:
        allow_same = config.allow_blocks_with_same_timestamp

    if proposed < previous:
        raise TimestampLowerThanPrevious(proposed=proposed, previous=previous)
    if proposed == previous and not allow_same:
        raise TimestampEqualsPrevious(proposed=proposed)


def require_hardfork(actual: SpecId, minimum: SpecId) -> None:
    """Check that a feature's minimum hardfork is active."""
    if actual < minimum:
        raise UnmetHardfork(actual=actual, minimum=minimum)


def check_block_tag(block_spec: BlockSpec, spec: SpecId) -> None:
    if block_spec.tag in POST_MERGE_TAGS and spec < SpecId.MERGE:
        raise InvalidBlockTag(block_spec=block_spec, spec=spec)


def check_block_number(block_spec: BlockSpec, latest_block_number: int) -> None:
    """Check that a numeric block reference is not past the head."""
    if block_spec.number is not None and block_spec.number > latest_block_number:
        raise InvalidBlockNumberOrHash(block_spec=block_spec, latest_block_number=latest_block_number)


def check_subscription_type(filter_id: int, expected: SubscriptionType, actual: SubscriptionType) -> None:
    if actual is not expected:
        raise InvalidFilterSubscriptionType(filter_id=filter_id, expected=expected, actual=actual)


def check_known_address(address: str, local_accounts: Iterable[str]) -> None:
    """Check that the node holds the key for `address`."""
    known = {account.lower() for account in local_accounts}
    if address.lower() not in known:
        raise UnknownAddress(address=address)


def check_transaction_index(index: int, transaction_count: int) -> None:
    if index >= transaction_count:
        raise InvalidTransactionIndex(index=index)


def check_rpc_version(version: Optional[str]) -> None:
    if version != JSONRPC_VERSION:
        raise RpcVersion(version=version)


def raise_for_failure(
    failure: Optional[TransactionFailure],
    *,
    is_call: bool,
    settings: ProviderConfig = config,
) -> None:
    """
    Raise a failed transaction as an error when the provider bails on failures.

    Args:
        failure: Failure of the executed transaction, None if it succeeded
        is_call: True for eth_call/eth_estimateGas, False for sent transactions
        settings: Provider configuration holding the bail options
    """
    if failure is None:
        return

    bail = settings.bail_on_call_failure if is_call else settings.bail_on_transaction_failure
    if bail:
        raise TransactionFailed(failure)
