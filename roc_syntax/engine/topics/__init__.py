"""Topic table, resolution and example selection."""

from .constants import HELP_DESCRIPTION, HELP_TOPIC, TOPICS, Topic, topic_names
from .resolver import resolve_topic, topic_matches
from .selector import (
    EXAMPLE_SEPARATOR,
    TOPIC_SELECTORS,
    UNICODE_ESCAPE_EXAMPLE,
    build_examples,
    select_examples,
)

__all__ = [
    "HELP_DESCRIPTION",
    "HELP_TOPIC",
    "TOPICS",
    "Topic",
    "topic_names",
    "resolve_topic",
    "topic_matches",
    "EXAMPLE_SEPARATOR",
    "TOPIC_SELECTORS",
    "UNICODE_ESCAPE_EXAMPLE",
    "build_examples",
    "select_examples",
]
