"""Tests for transaction_failure.py"""
import pytest
from eth_abi import encode
from pydantic import ValidationError

from ..decoders.revert_decoder import ERROR_SELECTOR, PANIC_SELECTOR
from .halt import Halt, HaltKind, OutOfGasError
from .transaction_failure import Inner, OpcodeNotFound, OutOfGas, Revert, TransactionFailure

TX_HASH = bytes.fromhex("ab" * 32)


class TestFromRevert:
    """Tests for TransactionFailure.from_revert."""

    def test_fields(self):
        output = ERROR_SELECTOR + encode(["string"], ["insufficient balance"])
        failure = TransactionFailure.from_revert(output, TX_HASH)

        assert failure.reason == Revert(output=output)
        assert failure.data == "0x" + output.hex()
        assert failure.transaction_hash == TX_HASH

    def test_empty_output(self):
        failure = TransactionFailure.from_revert(b"", TX_HASH)

        assert failure.reason == Revert(output=b"")
        assert failure.data == "0x"
        assert str(failure) == "Transaction reverted without a reason"

    def test_display_delegates_to_decoder(self):
        output = PANIC_SELECTOR + encode(["uint256"], [0x12])
        failure = TransactionFailure.from_revert(output, TX_HASH)

        assert str(failure) == (
            "VM Exception while processing transaction: reverted with panic code 18 "
            "(Division or modulo division by zero)"
        )

    def test_hex_transaction_hash(self):
        failure = TransactionFailure.from_revert(b"", "0x" + "ab" * 32)
        assert failure.transaction_hash == TX_HASH

    @pytest.mark.parametrize("tx_hash", [b"\x01" * 31, b"\x01" * 33, "0x1234"])
    def test_rejects_wrong_hash_size(self, tx_hash):
        with pytest.raises(ValidationError):
            TransactionFailure.from_revert(b"", tx_hash)

    def test_immutable(self):
        failure = TransactionFailure.from_revert(b"\x01", TX_HASH)
        with pytest.raises(ValidationError):
            failure.data = None


class TestFromHalt:
    """Tests for TransactionFailure.from_halt."""

    @pytest.mark.parametrize("kind", [HaltKind.OPCODE_NOT_FOUND, HaltKind.INVALID_FE_OPCODE])
    def test_invalid_opcode(self, kind):
        failure = TransactionFailure.from_halt(Halt(kind=kind), TX_HASH)

        assert failure.reason == OpcodeNotFound()
        assert failure.data is None
        assert str(failure) == "VM Exception while processing transaction: invalid opcode"

    def test_out_of_gas(self):
        halt = Halt.out_of_gas_halt(OutOfGasError.MEMORY_LIMIT)
        failure = TransactionFailure.from_halt(halt, TX_HASH)

        assert failure.reason == OutOfGas(detail=OutOfGasError.MEMORY_LIMIT)
        assert failure.data is None
        assert str(failure) == "out of gas"

    @pytest.mark.parametrize(
        "kind",
        [HaltKind.INVALID_JUMP, HaltKind.STACK_UNDERFLOW, HaltKind.CALL_TOO_DEEP, HaltKind.OUT_OF_FUND],
    )
    def test_other_halts_pass_through(self, kind):
        halt = Halt(kind=kind)
        failure = TransactionFailure.from_halt(halt, TX_HASH)

        assert failure.reason == Inner(halt=halt)
        assert str(failure) == kind.value


class TestToJson:
    """Tests for the structured JSON form."""

    def test_revert(self):
        failure = TransactionFailure.from_revert(b"\xde\xad\xbe\xef", TX_HASH)
        assert failure.to_json() == {
            "reason": {"Revert": "0xdeadbeef"},
            "data": "0xdeadbeef",
            "transactionHash": "0x" + "ab" * 32,
        }

    def test_opcode_not_found(self):
        failure = TransactionFailure.from_halt(Halt(kind=HaltKind.INVALID_FE_OPCODE), TX_HASH)
        assert failure.to_json() == {
            "reason": "OpcodeNotFound",
            "data": None,
            "transactionHash": "0x" + "ab" * 32,
        }

    def test_out_of_gas(self):
        failure = TransactionFailure.from_halt(Halt.out_of_gas_halt(), TX_HASH)
        assert failure.to_json()["reason"] == {"OutOfGas": "Basic"}

    def test_inner(self):
        failure = TransactionFailure.from_halt(Halt(kind=HaltKind.CREATE_COLLISION), TX_HASH)
        assert failure.to_json()["reason"] == {"Inner": "CreateCollision"}

    def test_inner_out_of_gas_keeps_detail(self):
        """An Inner reason built around an OutOfGas halt is tagged with its detail."""
        reason = Inner(halt=Halt.out_of_gas_halt(OutOfGasError.MEMORY))
        assert reason.model_dump() == {"Inner": {"OutOfGas": "Memory"}}

    @pytest.mark.parametrize(
        "failure, reason",
        [
            (TransactionFailure.from_revert(b"\x01", TX_HASH), {"Revert": "0x01"}),
            (TransactionFailure.from_halt(Halt.out_of_gas_halt(), TX_HASH), {"OutOfGas": "Basic"}),
            (TransactionFailure.from_halt(Halt(kind=HaltKind.OPCODE_NOT_FOUND), TX_HASH), "OpcodeNotFound"),
            (TransactionFailure.from_halt(Halt(kind=HaltKind.INVALID_JUMP), TX_HASH), {"Inner": "InvalidJump"}),
        ],
    )
    def test_each_reason_keeps_its_tag(self, failure, reason):
        """Reasons never serialize as another member of the union."""
        assert failure.to_json()["reason"] == reason
        assert failure.model_dump(by_alias=True)["reason"] == reason
