"""Syntax tool handlers.

Handles:
- get_roc_syntax: Return the full syntax reference
- search_roc_syntax: Resolve a query to a topic and return its examples
- list_roc_topics: List all searchable topics
"""

import logging
from typing import Any

from ...models import (
    CallToolResult,
    GetSyntaxParams,
    ListTopicsParams,
    ListTopicsResult,
    SearchSyntaxParams,
    SearchSyntaxResult,
    SyntaxResult,
    TextContent,
    ToolResult,
    TopicInfo,
)
from ..core import load_document, parse_sections
from ..topics import HELP_DESCRIPTION, HELP_TOPIC, TOPICS, build_examples, resolve_topic
from .base import HandlerContext, count_tokens

logger = logging.getLogger(__name__)


def _tool_result(text: str, structured: dict[str, Any], input_text: str = "") -> ToolResult:
    body = CallToolResult(content=[TextContent(text=text)], structuredContent=structured)
    return ToolResult(
        data=body.model_dump(exclude_none=True),
        input_tokens=count_tokens(input_text),
        output_tokens=count_tokens(text),
    )


def format_topic_list() -> str:
    """One ``- name: description`` line per topic."""
    return "\n".join(f"- {name}: {topic.description}" for name, topic in TOPICS.items())


async def handle_get_syntax(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Return the complete syntax reference.

    A load failure yields the sentinel error text instead of an error.
    """
    GetSyntaxParams.model_validate(params)
    document = load_document(ctx.syntax_file)
    result = SyntaxResult(syntax=document.text)
    return _tool_result(document.text, result.model_dump())


async def handle_search_syntax(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Search the syntax reference by topic or keyword.

    Args:
        params: Dict containing:
            - query: Topic name or keyword

    Returns:
        ToolResult with the matched topic and its examples, or the topic
        catalog tagged as "help" when nothing matched
    """
    query = SearchSyntaxParams.model_validate(params).query
    document = load_document(ctx.syntax_file)
    sections = parse_sections(document.text)

    topic = resolve_topic(query)
    if topic is None:
        topic_list = format_topic_list()
        result = SearchSyntaxResult(
            topic=HELP_TOPIC,
            description=HELP_DESCRIPTION,
            examples=topic_list,
        )
        text = f'No exact match for "{query}". Available topics:\n\n{topic_list}'
        return _tool_result(text, result.model_dump(), input_text=query)

    description = TOPICS[topic].description
    examples = build_examples(topic, sections, document.lines)
    logger.debug(f"Query '{query}' resolved to topic '{topic}'")

    result = SearchSyntaxResult(topic=topic, description=description, examples=examples)
    text = f"## {topic}\n\n{description}\n\n### Examples:\n\n```roc\n{examples}\n```"
    return _tool_result(text, result.model_dump(), input_text=query)


async def handle_list_topics(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """List every topic with its description, in table order."""
    ListTopicsParams.model_validate(params)
    result = ListTopicsResult(
        topics=[TopicInfo(name=name, description=t.description) for name, t in TOPICS.items()]
    )
    formatted = "\n".join(f"- **{t.name}**: {t.description}" for t in result.topics)
    text = f"# Available Roc Syntax Topics\n\n{formatted}"
    return _tool_result(text, result.model_dump())
