"""Tests for handlers.py"""
import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from ..decoders.revert_decoder import ERROR_SELECTOR
from ..errors.provider_error import InvalidChainId, TransactionFailed, UnmetHardfork
from ..models.chain import SpecId
from ..models.transaction_failure import TransactionFailure
from .handlers import install_error_handlers

TX_HASH = b"\x22" * 32
# Error(string) whose length word does not fit an index
OVERSIZED_REVERT = ERROR_SELECTOR + (32).to_bytes(32, "big") + (2**255).to_bytes(32, "big")


@pytest.fixture
def client():
    """App whose JSON-RPC route raises the error named in the request."""
    app = FastAPI()
    install_error_handlers(app)

    failures = {
        "eth_chainId": InvalidChainId(expected=31337, actual=1),
        "eth_blobBaseFee": UnmetHardfork(actual=SpecId.SHANGHAI, minimum=SpecId.CANCUN),
        "eth_sendTransaction": TransactionFailed(TransactionFailure.from_revert(b"", TX_HASH)),
        "eth_call": TransactionFailed(TransactionFailure.from_revert(OVERSIZED_REVERT, TX_HASH)),
    }

    @app.post("/")
    async def rpc(request: Request):
        body = await request.json()
        request.state.rpc_id = body.get("id")
        raise failures[body["method"]]

    return TestClient(app)


class TestProviderErrorHandler:
    """Tests for provider_error_handler."""

    def test_error_response(self, client):
        response = client.post("/", json={"jsonrpc": "2.0", "id": 1, "method": "eth_chainId"})

        assert response.status_code == 200
        assert response.json() == {
            "jsonrpc": "2.0",
            "id": 1,
            "error": {
                "code": -32000,
                "message": "Invalid chainId $1 provided, expected $31337 instead.",
            },
        }

    def test_invalid_params_code(self, client):
        response = client.post("/", json={"jsonrpc": "2.0", "id": "abc", "method": "eth_blobBaseFee"})

        body = response.json()
        assert body["id"] == "abc"
        assert body["error"]["code"] == -32602

    def test_transaction_failure_data(self, client):
        response = client.post("/", json={"jsonrpc": "2.0", "id": 7, "method": "eth_sendTransaction"})

        error = response.json()["error"]
        assert error["message"] == "Transaction reverted without a reason"
        assert error["data"] == {
            "reason": {"Revert": "0x"},
            "data": "0x",
            "transactionHash": "0x" + "22" * 32,
        }

    def test_undecodable_revert_is_a_jsonrpc_error(self, client):
        response = client.post("/", json={"jsonrpc": "2.0", "id": 8, "method": "eth_call"})

        assert response.status_code == 200
        error = response.json()["error"]
        assert error["code"] == -32000
        assert error["message"] == (
            "VM Exception while processing transaction: reverted with an unrecognized "
            f"custom error (return data: 0x{OVERSIZED_REVERT.hex()})"
        )
        assert error["data"]["reason"] == {"Revert": "0x" + OVERSIZED_REVERT.hex()}
