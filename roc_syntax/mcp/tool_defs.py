"""MCP tool definitions for the Roc Syntax server.

This module contains the tool definitions returned by the tools/list method.
Each definition carries JSON schemas for its input and structured output.
"""

from ..engine.topics import topic_names

TOOL_DEFINITIONS: list[dict] = [
    {
        "name": "get_roc_syntax",
        "title": "Get Roc Syntax Reference",
        "description": (
            "Returns the complete Roc syntax reference file demonstrating all Roc language "
            "syntax including operators, pattern matching, effects, types, and more."
        ),
        "inputSchema": {"type": "object", "properties": {}},
        "outputSchema": {
            "type": "object",
            "properties": {"syntax": {"type": "string"}},
            "required": ["syntax"],
        },
    },
    {
        "name": "search_roc_syntax",
        "title": "Search Roc Syntax by Topic",
        "description": (
            "Search for specific Roc syntax by topic. "
            f"Available topics: {', '.join(topic_names())}. You can also search by keywords."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Topic or keyword to search for (e.g., 'pattern_matching', 'operators', 'effects')",
                },
            },
            "required": ["query"],
        },
        "outputSchema": {
            "type": "object",
            "properties": {
                "topic": {"type": "string"},
                "description": {"type": "string"},
                "examples": {"type": "string"},
            },
            "required": ["topic", "description", "examples"],
        },
    },
    {
        "name": "list_roc_topics",
        "title": "List Roc Syntax Topics",
        "description": "List all available Roc syntax topics that can be queried",
        "inputSchema": {"type": "object", "properties": {}},
        "outputSchema": {
            "type": "object",
            "properties": {
                "topics": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string"},
                            "description": {"type": "string"},
                        },
                        "required": ["name", "description"],
                    },
                },
            },
            "required": ["topics"],
        },
    },
]


def get_tool_definition(name: str) -> dict | None:
    """Look up a tool definition by name."""
    return next((t for t in TOOL_DEFINITIONS if t["name"] == name), None)
