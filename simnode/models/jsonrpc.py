"""Pydantic schemas for JSON-RPC error responses."""
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

# Standard JSON-RPC error codes
INVALID_PARAMS = -32602
# Implementation-defined server error
SERVER_ERROR = -32000


class JsonRpcError(BaseModel):
    """Error object returned in place of a result."""

    model_config = ConfigDict(frozen=True)

    code: int
    message: str
    data: Optional[Any] = None

    def to_wire(self) -> dict[str, Any]:
        """Serialize, omitting `data` when absent."""
        wire = self.model_dump(mode="json")
        if self.data is None:
            del wire["data"]
        return wire


class JsonRpcErrorResponse(BaseModel):
    """Response envelope for a failed request."""

    model_config = ConfigDict(frozen=True)

    jsonrpc: Literal["2.0"] = "2.0"
    id: Optional[Union[int, str]] = None
    error: JsonRpcError

    def to_wire(self) -> dict[str, Any]:
        return {
            "jsonrpc": self.jsonrpc,
            "id": self.id,
            "error": self.error.to_wire(),
        }
