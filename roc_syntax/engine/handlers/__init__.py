"""Tool handlers for the syntax engine.

Each handler is a standalone async function that takes:
- params: dict[str, Any] - Tool parameters from MCP call
- ctx: HandlerContext - Shared engine context

And returns:
- ToolResult with data, input_tokens, output_tokens
"""

from .base import HandlerContext, HandlerFunc, count_tokens
from .syntax import (
    format_topic_list,
    handle_get_syntax,
    handle_list_topics,
    handle_search_syntax,
)

__all__ = [
    # Base
    "HandlerContext",
    "HandlerFunc",
    "count_tokens",
    # Syntax handlers
    "format_topic_list",
    "handle_get_syntax",
    "handle_search_syntax",
    "handle_list_topics",
]
