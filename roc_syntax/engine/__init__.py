"""Syntax engine: tool dispatch over the Roc syntax reference."""

import logging
from pathlib import Path
from typing import Any

from ..config import settings
from ..models import ToolName, ToolResult
from .handlers import (
    HandlerContext,
    HandlerFunc,
    handle_get_syntax,
    handle_list_topics,
    handle_search_syntax,
)

logger = logging.getLogger(__name__)

TOOL_HANDLERS: dict[ToolName, HandlerFunc] = {
    ToolName.GET_ROC_SYNTAX: handle_get_syntax,
    ToolName.SEARCH_ROC_SYNTAX: handle_search_syntax,
    ToolName.LIST_ROC_TOPICS: handle_list_topics,
}


class SyntaxEngine:
    """Executes syntax tools against a reference file."""

    def __init__(self, syntax_file: Path | str | None = None):
        self.syntax_file = Path(syntax_file) if syntax_file else settings.syntax_file_path

    def _context(self) -> HandlerContext:
        return HandlerContext(syntax_file=self.syntax_file)

    async def execute(self, tool: ToolName | str, params: dict[str, Any] | None = None) -> ToolResult:
        """Execute a tool.

        Args:
            tool: Tool name
            params: Tool parameters

        Returns:
            ToolResult from the tool's handler

        Raises:
            ValueError: Unknown tool name
            pydantic.ValidationError: Invalid tool parameters
        """
        try:
            tool_name = ToolName(tool)
        except ValueError:
            raise ValueError(f"Unknown tool: {tool}") from None

        logger.info(f"Executing tool {tool_name.value}")
        handler = TOOL_HANDLERS[tool_name]
        return await handler(params or {}, self._context())
