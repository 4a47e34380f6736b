"""JSON-RPC method dispatch shared by the stdio and HTTP transports.

Implements the MCP methods a tool-only server needs:
- initialize / ping
- tools/list
- tools/call
Notifications (messages without an id) are accepted and produce no response.
"""

import logging
from typing import Any

from pydantic import ValidationError

from .. import __version__
from ..config import settings
from ..engine import SyntaxEngine
from ..models import ToolCallParams, ToolName
from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    is_notification,
    jsonrpc_error,
    jsonrpc_response,
)
from .tool_defs import TOOL_DEFINITIONS

logger = logging.getLogger(__name__)

# Newest first; the first entry is offered when the client asks for an unknown one
SUPPORTED_PROTOCOL_VERSIONS = ("2025-06-18", "2025-03-26", "2024-11-05")


def sanitize_error_message(error: Exception) -> str:
    """
    Sanitize error messages to prevent information disclosure.

    Returns a generic message for unexpected errors while preserving
    useful information for known error types.
    """
    error_str = str(error)

    safe_patterns = [
        "Unknown tool",
        "Invalid parameter",
    ]

    for pattern in safe_patterns:
        if pattern.lower() in error_str.lower():
            return error_str

    logger.error(f"Tool execution error: {error}", exc_info=error)
    return "An error occurred processing your request. Please try again."


def initialize_result(requested_version: str | None) -> dict:
    """Build the initialize response body."""
    version = (
        requested_version
        if requested_version in SUPPORTED_PROTOCOL_VERSIONS
        else SUPPORTED_PROTOCOL_VERSIONS[0]
    )
    return {
        "protocolVersion": version,
        "capabilities": {"tools": {"listChanged": False}},
        "serverInfo": {"name": settings.server_name, "version": __version__},
    }


async def call_tool(engine: SyntaxEngine, params: dict[str, Any], id: Any) -> dict:
    try:
        call = ToolCallParams.model_validate(params)
    except ValidationError as e:
        return jsonrpc_error(
            id,
            INVALID_PARAMS,
            "Invalid parameters for tools/call",
            e.errors(include_url=False, include_context=False),
        )

    if call.name not in {t.value for t in ToolName}:
        return jsonrpc_error(id, INVALID_PARAMS, f"Unknown tool: {call.name}")

    try:
        result = await engine.execute(call.name, call.arguments)
    except ValidationError as e:
        return jsonrpc_error(
            id,
            INVALID_PARAMS,
            f"Invalid parameters for {call.name}",
            e.errors(include_url=False, include_context=False),
        )

    return jsonrpc_response(id, result.data)


async def handle_message(message: Any, engine: SyntaxEngine | None = None) -> dict | None:
    """Handle one decoded JSON-RPC message.

    Args:
        message: Decoded JSON value
        engine: Engine to run tools with (defaults to the configured one)

    Returns:
        The JSON-RPC response, or None for notifications
    """
    if not isinstance(message, dict) or not isinstance(message.get("method"), str):
        id = message.get("id") if isinstance(message, dict) else None
        return jsonrpc_error(id, INVALID_REQUEST, "Invalid Request")

    method = message["method"]
    if is_notification(message):
        logger.debug(f"Notification received: {method}")
        return None

    id = message["id"]
    params = message.get("params") or {}
    if not isinstance(params, dict):
        return jsonrpc_error(id, INVALID_PARAMS, "params must be an object")

    engine = engine or SyntaxEngine()

    try:
        if method == "initialize":
            return jsonrpc_response(id, initialize_result(params.get("protocolVersion")))
        if method == "ping":
            return jsonrpc_response(id, {})
        if method == "tools/list":
            return jsonrpc_response(id, {"tools": TOOL_DEFINITIONS})
        if method == "tools/call":
            return await call_tool(engine, params, id)
    except Exception as e:
        return jsonrpc_error(id, INTERNAL_ERROR, sanitize_error_message(e))

    return jsonrpc_error(id, METHOD_NOT_FOUND, f"Method not found: {method}")
