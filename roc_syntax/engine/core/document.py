"""Document data structures for the syntax engine.

This module contains the core data structures for representing
the Roc syntax reference and the named sections parsed from it.
"""

import re
from dataclasses import dataclass, field


@dataclass
class Section:
    """A named run of lines in the syntax reference.

    Attributes:
        name: Section name from the rule catalog
        content: Section text including the header line
        start_line: Starting line number (1-indexed)
        end_line: Ending line number (1-indexed, inclusive)
    """

    name: str
    content: str
    start_line: int
    end_line: int


@dataclass(frozen=True)
class SectionRule:
    """Detection rule that opens a section when a line matches."""

    name: str
    pattern: re.Pattern[str]

    def matches(self, line: str) -> bool:
        return self.pattern.match(line) is not None


@dataclass(frozen=True)
class SyntaxDocument:
    """The syntax reference as loaded for a single request.

    Attributes:
        text: Raw document text (or the load-failure sentinel)
        lines: Document text split on newlines
        loaded: False when the text is the load-failure sentinel
    """

    text: str
    lines: list[str] = field(default_factory=list)
    loaded: bool = True

    @classmethod
    def from_text(cls, text: str, loaded: bool = True) -> "SyntaxDocument":
        return cls(text=text, lines=text.split("\n"), loaded=loaded)
