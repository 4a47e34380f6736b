"""Section parsing for the syntax reference.

Sections are detected by matching each line's prefix against an ordered
rule catalog. The first matching rule opens a new section; following
lines accumulate into it until the next match.
"""

import re

from .document import Section, SectionRule


def _rule(name: str, pattern: str) -> SectionRule:
    return SectionRule(name=name, pattern=re.compile(pattern))


# Order matters: the first matching rule wins for a given line
SECTION_RULES: tuple[SectionRule, ...] = (
    _rule("number_operators", r"^number_operators\s*:"),
    _rule("boolean_operators", r"^boolean_operators\s*:"),
    _rule("simple_match", r"^simple_match\s*:"),
    _rule("match_list_patterns", r"^match_list_patterns\s*:"),
    _rule("match_tag_union_advanced", r"^match_tag_union_advanced\s*:"),
    _rule("multiline_str", r"^multiline_str\s*:"),
    _rule("effect_demo", r"^effect_demo!\s*:"),
    _rule("for_loop", r"^for_loop\s*="),
    _rule("dbg_keyword", r"^dbg_keyword\s*="),
    _rule("if_demo", r"^if_demo\s*:"),
    _rule("tuple_demo", r"^tuple_demo\s*="),
    _rule("type_var", r"^type_var\s*:"),
    _rule("destructuring", r"^destructuring\s*="),
    _rule("record_update_2", r"^record_update_2\s*:"),
    _rule("number_literals", r"^number_literals\s*="),
    _rule("opaque_types", r"^Username\s*::"),
    _rule("nominal_types", r"^Animal\s*:="),
    _rule("early_return", r"^early_return\s*="),
    _rule("where_clause", r"^stringify\s*:"),
    _rule("main", r"^main!\s*="),
    _rule("imports", r"^import\s+"),
    _rule("app_header", r"^app\s*\["),
)


def match_rule(line: str, rules: tuple[SectionRule, ...] | list[SectionRule]) -> SectionRule | None:
    """Return the first rule in catalog order that matches the line."""
    for rule in rules:
        if rule.matches(line):
            return rule
    return None


def parse_sections(
    text: str,
    rules: tuple[SectionRule, ...] | list[SectionRule] = SECTION_RULES,
) -> list[Section]:
    """Split text into named sections.

    Args:
        text: Document text
        rules: Ordered detection rules

    Returns:
        Sections in document order. Lines before the first rule match
        belong to no section.
    """
    sections: list[Section] = []
    current: Section | None = None

    for i, line in enumerate(text.split("\n"), start=1):
        rule = match_rule(line, rules)
        if rule is not None:
            if current is not None:
                current.end_line = i - 1
                sections.append(current)
            current = Section(name=rule.name, content=line, start_line=i, end_line=i)
        elif current is not None:
            current.content += "\n" + line
            current.end_line = i

    if current is not None:
        sections.append(current)

    return sections


def find_section(sections: list[Section], name: str) -> Section | None:
    """Return the first section with the given name, if any."""
    return next((s for s in sections if s.name == name), None)
