"""Engine core module.

This module contains the document pipeline for the syntax engine:
- Document data structures
- Reference loading
- Section parsing
"""

from .document import Section, SectionRule, SyntaxDocument
from .loader import LOAD_ERROR_SENTINEL, load_document, load_syntax_reference
from .parser import SECTION_RULES, find_section, match_rule, parse_sections

__all__ = [
    # Document structures
    "Section",
    "SectionRule",
    "SyntaxDocument",
    # Loading
    "LOAD_ERROR_SENTINEL",
    "load_document",
    "load_syntax_reference",
    # Parsing
    "SECTION_RULES",
    "find_section",
    "match_rule",
    "parse_sections",
]
