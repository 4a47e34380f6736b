"""Response models for the Roc Syntax MCP Server."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

# ============ TOOL OUTPUT MODELS ============


class SyntaxResult(BaseModel):
    """Structured output of get_roc_syntax."""

    syntax: str = Field(..., description="Full Roc syntax reference")


class SearchSyntaxResult(BaseModel):
    """Structured output of search_roc_syntax."""

    topic: str = Field(..., description="Matched topic, or 'help' when nothing matched")
    description: str = Field(..., description="Topic description")
    examples: str = Field(..., description="Example code blocks for the topic")


class TopicInfo(BaseModel):
    """A topic name and its description."""

    name: str
    description: str


class ListTopicsResult(BaseModel):
    """Structured output of list_roc_topics."""

    topics: list[TopicInfo] = Field(default_factory=list)


# ============ MCP CONTENT MODELS ============


class TextContent(BaseModel):
    """MCP text content block."""

    type: Literal["text"] = "text"
    text: str


class CallToolResult(BaseModel):
    """MCP tools/call result body."""

    content: list[TextContent] = Field(default_factory=list)
    structuredContent: dict[str, Any] | None = None
    isError: bool = False


# ============ ENGINE / TRANSPORT MODELS ============


class ToolResult(BaseModel):
    """Result of a tool execution."""

    data: dict[str, Any] = Field(..., description="Tool result payload")
    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)


class UsageInfo(BaseModel):
    """Token usage and latency for a request."""

    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)
    latency_ms: int = Field(default=0, ge=0)


class MCPResponse(BaseModel):
    """MCP tool execution response (REST form)."""

    success: bool = Field(..., description="Whether the tool executed successfully")
    result: Any = Field(default=None, description="Tool result payload")
    error: str | None = Field(default=None, description="Error message if failed")
    usage: UsageInfo = Field(default_factory=UsageInfo)


class HealthResponse(BaseModel):
    """Liveness check response."""

    status: str
    version: str
    timestamp: datetime


class ReadyResponse(BaseModel):
    """Readiness check response."""

    status: str
    version: str
    checks: dict[str, bool] = Field(default_factory=dict)
