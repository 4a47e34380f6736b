"""Enumeration types for the Roc Syntax MCP Server."""

from enum import StrEnum


class ToolName(StrEnum):
    """Available syntax tools."""

    GET_ROC_SYNTAX = "get_roc_syntax"
    SEARCH_ROC_SYNTAX = "search_roc_syntax"
    LIST_ROC_TOPICS = "list_roc_topics"
