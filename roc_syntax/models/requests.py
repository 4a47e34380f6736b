"""Request models (Pydantic *Params classes) for the Roc Syntax MCP Server."""

from typing import Any

from pydantic import BaseModel, Field

from .enums import ToolName

# ============ CORE REQUEST MODELS ============


class MCPRequest(BaseModel):
    """MCP tool execution request (REST form)."""

    tool: ToolName = Field(..., description="The syntax tool to execute")
    params: dict[str, Any] = Field(default_factory=dict, description="Tool parameters")


class ToolCallParams(BaseModel):
    """Params of a JSON-RPC tools/call request."""

    name: str = Field(..., description="Tool name")
    arguments: dict[str, Any] = Field(default_factory=dict, description="Tool arguments")


# ============ TOOL PARAMS ============


class GetSyntaxParams(BaseModel):
    """Parameters for get_roc_syntax (none)."""


class SearchSyntaxParams(BaseModel):
    """Parameters for search_roc_syntax tool."""

    query: str = Field(
        ...,
        description="Topic or keyword to search for (e.g., 'pattern_matching', 'operators', 'effects')",
    )


class ListTopicsParams(BaseModel):
    """Parameters for list_roc_topics (none)."""
