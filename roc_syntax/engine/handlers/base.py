"""Base infrastructure for tool handlers.

This module provides the common types and utilities used by all handler modules.
Each handler receives a HandlerContext and returns a ToolResult.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Coroutine

if TYPE_CHECKING:
    from ...models import ToolResult


@dataclass
class HandlerContext:
    """Context object passed to all handlers.

    Contains the per-request inputs handlers need. The reference document
    itself is not cached here: handlers reload it on every call.
    """

    # Reference document location
    syntax_file: Path


# Type alias for handler functions
HandlerFunc = Callable[
    [dict[str, Any], HandlerContext],
    Coroutine[Any, Any, "ToolResult"],
]


def count_tokens(text: str) -> int:
    """Estimate token count for a string.

    Uses a simple heuristic of ~4 characters per token.
    This is a reasonable approximation for English text.
    """
    if not text:
        return 0
    return max(1, len(text) // 4)
