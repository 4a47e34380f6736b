"""Topic table for syntax search.

Each topic maps to its search keywords and a one-line description.
Declaration order is significant: the resolver returns the first
topic whose keywords match, so earlier topics win ties.
"""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Topic:
    """A searchable category of Roc syntax."""

    name: str
    keywords: tuple[str, ...]
    description: str


# Topic returned when a query matches nothing
HELP_TOPIC = "help"
HELP_DESCRIPTION = "Available topics"

_TOPICS = (
    Topic(
        "operators",
        ("operator", "operators", "+", "-", "*", "/", "==", "!=", "<", ">", "<=", ">=", "and", "or", "not"),
        "Arithmetic, comparison, and boolean operators",
    ),
    Topic(
        "pattern_matching",
        ("match", "pattern", "case", "switch"),
        "Pattern matching with match expressions",
    ),
    Topic(
        "list_patterns",
        ("list", "array", "spread", ".."),
        "List destructuring and pattern matching",
    ),
    Topic(
        "tag_unions",
        ("tag", "union", "variant", "enum", "Ok", "Err", "Try"),
        "Tag unions (sum types) and Result/Try types",
    ),
    Topic(
        "strings",
        ("string", "str", "multiline", "interpolation", "unicode"),
        "String literals, multiline strings, and interpolation",
    ),
    Topic(
        "effects",
        ("effect", "effectful", "!", "io", "side effect"),
        "Effectful functions (marked with !)",
    ),
    Topic(
        "loops",
        ("for", "loop", "iterate", "var", "$"),
        "For loops and mutable variables",
    ),
    Topic(
        "conditionals",
        ("if", "else", "conditional", "branch"),
        "If/else expressions",
    ),
    Topic(
        "tuples",
        ("tuple", "pair", "triplet"),
        "Tuple types and destructuring",
    ),
    Topic(
        "records",
        ("record", "struct", "object", "field", "update"),
        "Record types, access, and updates",
    ),
    Topic(
        "types",
        ("type", "annotation", "signature", "where", "constraint"),
        "Type annotations and constraints",
    ),
    Topic(
        "numbers",
        ("number", "int", "float", "decimal", "u8", "i64", "f64", "hex", "binary"),
        "Numeric types and literals",
    ),
    Topic(
        "opaque",
        ("opaque", "::", "newtype", "wrapper"),
        "Opaque types for type-safe wrappers",
    ),
    Topic(
        "nominal",
        ("nominal", ":=", "custom", "method", "is_eq"),
        "Nominal types with custom methods",
    ),
    Topic(
        "functions",
        ("function", "lambda", "arrow", "=>", "->", "return"),
        "Function definitions and early returns",
    ),
    Topic(
        "imports",
        ("import", "module", "as", "alias"),
        "Module imports and aliases",
    ),
    Topic(
        "testing",
        ("test", "expect", "assert"),
        "Testing with expect and test blocks",
    ),
)

TOPICS: MappingProxyType[str, Topic] = MappingProxyType({t.name: t for t in _TOPICS})


def topic_names() -> list[str]:
    """Topic names in declaration order."""
    return list(TOPICS)
