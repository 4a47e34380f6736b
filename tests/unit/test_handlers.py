"""Unit tests for the syntax tool handlers via SyntaxEngine."""

import asyncio

import pytest
from pydantic import ValidationError

from roc_syntax.engine import SyntaxEngine
from roc_syntax.engine.core import LOAD_ERROR_SENTINEL
from roc_syntax.engine.handlers import format_topic_list
from roc_syntax.engine.topics import TOPICS, UNICODE_ESCAPE_EXAMPLE
from roc_syntax.models import ToolName


def run(engine, tool, params=None):
    return asyncio.run(engine.execute(tool, params or {}))


class TestGetSyntax:
    """Tests for get_roc_syntax."""

    def test_returns_file_verbatim(self, sample_engine, sample_syntax_file):
        """Test that text and structured output both equal the file contents."""
        result = run(sample_engine, ToolName.GET_ROC_SYNTAX)
        raw = sample_syntax_file.read_bytes().decode("utf-8")
        assert result.data["structuredContent"] == {"syntax": raw}
        assert result.data["content"] == [{"type": "text", "text": raw}]
        assert result.output_tokens > 0

    def test_missing_file_returns_sentinel(self, missing_engine):
        """Test that a missing reference degrades to the sentinel text."""
        result = run(missing_engine, "get_roc_syntax")
        assert result.data["structuredContent"]["syntax"].startswith(LOAD_ERROR_SENTINEL)
        assert result.data["isError"] is False

    def test_default_engine_serves_packaged_reference(self, packaged_text):
        """Test that the default engine reads the packaged file."""
        result = run(SyntaxEngine(), "get_roc_syntax")
        assert result.data["structuredContent"]["syntax"] == packaged_text


class TestSearchSyntax:
    """Tests for search_roc_syntax."""

    def test_pattern_matching_scenario(self, sample_engine):
        """Test that 'pattern matching' returns the simple_match section."""
        result = run(sample_engine, "search_roc_syntax", {"query": "pattern matching"})
        structured = result.data["structuredContent"]

        assert structured["topic"] == "pattern_matching"
        assert structured["description"] == "Pattern matching with match expressions"
        assert structured["examples"].startswith("simple_match : [A, B] -> Str")
        assert 'B => "b"' in structured["examples"]
        assert "boolean_operators" not in structured["examples"]

        text = result.data["content"][0]["text"]
        assert text == (
            "## pattern_matching\n\nPattern matching with match expressions\n\n"
            f"### Examples:\n\n```roc\n{structured['examples']}\n```"
        )

    def test_no_match_returns_help(self, sample_engine):
        """Test that an unresolvable query lists the topics under 'help'."""
        result = run(sample_engine, "search_roc_syntax", {"query": "zzz"})
        structured = result.data["structuredContent"]

        assert structured["topic"] == "help"
        assert structured["description"] == "Available topics"
        assert structured["examples"] == format_topic_list()
        for name, topic in TOPICS.items():
            assert f"- {name}: {topic.description}" in structured["examples"]

        text = result.data["content"][0]["text"]
        assert text.startswith('No exact match for "zzz". Available topics:\n\n')

    def test_partial_match_on_sample(self, sample_engine):
        """Test that only the sections present in the document are returned."""
        result = run(sample_engine, "search_roc_syntax", {"query": "operators"})
        examples = result.data["structuredContent"]["examples"]
        assert examples == "boolean_operators : Bool, Bool -> Bool\nboolean_operators = |a, b| a and b\n"

    def test_raw_line_topic_on_sample(self, sample_engine):
        """Test the imports topic against the sample document."""
        result = run(sample_engine, "search_roc_syntax", {"query": "imports"})
        assert result.data["structuredContent"]["examples"] == "import pf.Stdout\nimport Str"

    def test_missing_file_still_answers(self, missing_engine):
        """Test that a read failure yields empty examples, not an error."""
        result = run(missing_engine, "search_roc_syntax", {"query": "tuples"})
        assert result.data["structuredContent"]["topic"] == "tuples"
        assert result.data["structuredContent"]["examples"] == ""

        result = run(missing_engine, "search_roc_syntax", {"query": "strings"})
        assert result.data["structuredContent"]["examples"] == UNICODE_ESCAPE_EXAMPLE

    def test_query_is_required(self, sample_engine):
        """Test that a missing query is rejected by validation."""
        with pytest.raises(ValidationError):
            run(sample_engine, "search_roc_syntax", {})

    def test_counts_query_tokens(self, sample_engine):
        """Test that the query contributes input tokens."""
        result = run(sample_engine, "search_roc_syntax", {"query": "pattern matching"})
        assert result.input_tokens > 0


class TestListTopics:
    """Tests for list_roc_topics."""

    def test_one_entry_per_topic_in_order(self, sample_engine):
        """Test that every topic is listed once, in table order."""
        result = run(sample_engine, "list_roc_topics")
        topics = result.data["structuredContent"]["topics"]

        names = [t["name"] for t in topics]
        assert names == list(TOPICS)
        assert len(set(names)) == len(names)
        assert topics[0] == {
            "name": "operators",
            "description": "Arithmetic, comparison, and boolean operators",
        }

    def test_formatted_listing(self, sample_engine):
        """Test the bullet listing text."""
        result = run(sample_engine, "list_roc_topics")
        text = result.data["content"][0]["text"]
        assert text.startswith("# Available Roc Syntax Topics\n\n- **operators**: ")
        assert text.count("\n- **") == len(TOPICS)


class TestEngine:
    """Tests for SyntaxEngine dispatch."""

    def test_unknown_tool(self, sample_engine):
        """Test that an unknown tool name raises ValueError."""
        with pytest.raises(ValueError, match="Unknown tool"):
            run(sample_engine, "rm_rf")

    def test_none_params(self, sample_engine):
        """Test that params default to an empty dict."""
        result = asyncio.run(sample_engine.execute("list_roc_topics"))
        assert len(result.data["structuredContent"]["topics"]) == len(TOPICS)
