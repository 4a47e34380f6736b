"""Pydantic models for Roc Syntax MCP Server request/response schemas.

Import from submodules directly for narrower imports:

    from roc_syntax.models.enums import ToolName
    from roc_syntax.models.responses import SearchSyntaxResult
"""

# ============ ENUMS ============
from .enums import ToolName

# ============ REQUEST MODELS ============
from .requests import (
    GetSyntaxParams,
    ListTopicsParams,
    MCPRequest,
    SearchSyntaxParams,
    ToolCallParams,
)

# ============ RESPONSE MODELS ============
from .responses import (
    CallToolResult,
    HealthResponse,
    ListTopicsResult,
    MCPResponse,
    ReadyResponse,
    SearchSyntaxResult,
    SyntaxResult,
    TextContent,
    ToolResult,
    TopicInfo,
    UsageInfo,
)

__all__ = [
    # Enums
    "ToolName",
    # Request models
    "GetSyntaxParams",
    "ListTopicsParams",
    "MCPRequest",
    "SearchSyntaxParams",
    "ToolCallParams",
    # Response models
    "CallToolResult",
    "HealthResponse",
    "ListTopicsResult",
    "MCPResponse",
    "ReadyResponse",
    "SearchSyntaxResult",
    "SyntaxResult",
    "TextContent",
    "ToolResult",
    "TopicInfo",
    "UsageInfo",
]
