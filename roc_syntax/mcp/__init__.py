"""MCP (Model Context Protocol) transport module.

This module contains the protocol pieces shared by both transports:
- Tool definitions for tools/list
- JSON-RPC 2.0 helpers
- Method dispatch (initialize, ping, tools/list, tools/call)

The HTTP router lives in .transport and imports FastAPI; import it
directly when needed: from roc_syntax.mcp.transport import router
"""

from .dispatch import SUPPORTED_PROTOCOL_VERSIONS, handle_message, sanitize_error_message
from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    is_notification,
    jsonrpc_error,
    jsonrpc_response,
)
from .tool_defs import TOOL_DEFINITIONS, get_tool_definition

__all__ = [
    # Tool definitions
    "TOOL_DEFINITIONS",
    "get_tool_definition",
    # Dispatch
    "SUPPORTED_PROTOCOL_VERSIONS",
    "handle_message",
    "sanitize_error_message",
    # JSON-RPC helpers
    "jsonrpc_response",
    "jsonrpc_error",
    "is_notification",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
]
