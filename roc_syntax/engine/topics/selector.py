"""Example selection per topic.

Each topic has a selector that pulls its examples from the parsed
sections or straight from the raw document lines. Missing sections
contribute nothing; they never raise.
"""

from collections.abc import Callable

from ..core.document import Section
from ..core.parser import find_section

# Separator between example blocks in the assembled output
EXAMPLE_SEPARATOR = "\n\n---\n\n"

UNICODE_ESCAPE_EXAMPLE = 'Unicode escape: "\\u(00A0)"'

Selector = Callable[[list[Section], list[str]], list[str]]


def _sections(*names: str) -> Selector:
    """Selector returning the content of the named sections, in order."""

    def select(sections: list[Section], lines: list[str]) -> list[str]:
        found = (find_section(sections, name) for name in names)
        return [s.content if s else "" for s in found]

    return select


def _with_literal(selector: Selector, literal: str) -> Selector:
    """Append a fixed example after another selector's output."""

    def select(sections: list[Section], lines: list[str]) -> list[str]:
        return [*selector(sections, lines), literal]

    return select


def _lines_starting_with(prefix: str) -> Selector:
    def select(sections: list[Section], lines: list[str]) -> list[str]:
        return ["\n".join(line for line in lines if line.startswith(prefix))]

    return select


def _lines_containing(marker: str) -> Selector:
    def select(sections: list[Section], lines: list[str]) -> list[str]:
        return ["\n".join(line for line in lines if marker in line)]

    return select


TOPIC_SELECTORS: dict[str, Selector] = {
    "operators": _sections("number_operators", "boolean_operators"),
    "pattern_matching": _sections("simple_match"),
    "list_patterns": _sections("match_list_patterns"),
    "tag_unions": _sections("match_tag_union_advanced"),
    "strings": _with_literal(_sections("multiline_str"), UNICODE_ESCAPE_EXAMPLE),
    "effects": _sections("effect_demo"),
    "loops": _sections("for_loop"),
    "conditionals": _sections("if_demo"),
    "tuples": _sections("tuple_demo"),
    "records": _sections("destructuring", "record_update_2"),
    "types": _sections("type_var", "where_clause"),
    "numbers": _sections("number_literals"),
    "opaque": _sections("opaque_types"),
    "nominal": _sections("nominal_types"),
    "functions": _sections("early_return"),
    "imports": _lines_starting_with("import "),
    "testing": _lines_containing("expect "),
}


def select_examples(topic: str, sections: list[Section], lines: list[str]) -> list[str]:
    """Collect the non-empty example blocks for a topic.

    Args:
        topic: Resolved topic name
        sections: Parsed sections of the document
        lines: Raw document lines

    Returns:
        Example blocks in selector order (unknown topics yield none)
    """
    selector = TOPIC_SELECTORS.get(topic)
    if selector is None:
        return []
    return [block for block in selector(sections, lines) if block]


def build_examples(topic: str, sections: list[Section], lines: list[str]) -> str:
    """Join a topic's example blocks with EXAMPLE_SEPARATOR."""
    return EXAMPLE_SEPARATOR.join(select_examples(topic, sections, lines))
