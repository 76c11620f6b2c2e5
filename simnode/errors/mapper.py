"""Conversion of provider errors into JSON-RPC error objects."""
import logging

from ..models.jsonrpc import JsonRpcError
from .provider_error import ProviderError

logger = logging.getLogger(__name__)


def to_jsonrpc_error(error: ProviderError) -> JsonRpcError:
    """
    Map a provider error onto the wire error object.

    Args:
        error: Raised provider error

    Returns:
        JSON-RPC error with the cause's code, its message and, for failed
        transactions, the failure as structured data
    """
    jsonrpc_error = JsonRpcError(
        code=error.code,
        message=str(error),
        data=error.jsonrpc_data(),
    )
    logger.debug(f"Mapped {type(error).__name__} to JSON-RPC error {jsonrpc_error.code}")
    return jsonrpc_error
