"""JSON-RPC 2.0 helpers for the MCP transports.

Both the stdio loop and the HTTP endpoint build their responses
through these helpers.

See: https://www.jsonrpc.org/specification
"""

from typing import Any


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Create a JSON-RPC 2.0 success response.

    Args:
        id: Request ID (must match the request)
        result: The result payload

    Returns:
        JSON-RPC 2.0 response dict
    """
    return {"jsonrpc": "2.0", "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str, data: Any = None) -> dict:
    """Create a JSON-RPC 2.0 error response.

    Args:
        id: Request ID (None for parse errors)
        code: Error code (negative integer)
        message: Human-readable error message
        data: Optional structured error detail

    Returns:
        JSON-RPC 2.0 error response dict
    """
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": id, "error": error}


def is_notification(message: dict) -> bool:
    """Notifications carry no id and get no response."""
    return "id" not in message


# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
