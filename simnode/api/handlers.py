"""Exception handlers writing provider errors as JSON-RPC responses."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..errors.mapper import to_jsonrpc_error
from ..errors.provider_error import ProviderError
from ..models.jsonrpc import JsonRpcErrorResponse

logger = logging.getLogger(__name__)


async def provider_error_handler(request: Request, exc: ProviderError) -> JSONResponse:
    """
    Write a provider error as a JSON-RPC error response.

    The request id is taken from `request.state.rpc_id`, which the JSON-RPC
    router sets after parsing the request body.
    """
    error = to_jsonrpc_error(exc)
    request_id = getattr(request.state, "rpc_id", None)

    logger.warning(f"Request {request_id} failed with {error.code}: {error.message}")

    response = JsonRpcErrorResponse(id=request_id, error=error)
    # JSON-RPC errors travel in a successful HTTP response
    return JSONResponse(status_code=200, content=response.to_wire())


def install_error_handlers(app: FastAPI) -> None:
    """Register the provider error handler on an application."""
    app.add_exception_handler(ProviderError, provider_error_handler)
