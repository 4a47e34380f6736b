"""Topic resolution for free-text syntax queries.

Resolution is first-match over the topic table, not ranked:
1. A query equal to a topic name resolves to that topic.
2. Otherwise the first topic (in table order) with a keyword that is a
   substring of the query, or that contains the query, wins.
"""

import logging
from collections.abc import Mapping

from .constants import TOPICS, Topic

logger = logging.getLogger(__name__)


def topic_matches(query_lower: str, topic: Topic) -> bool:
    """Check a lowercased query against one topic.

    Keywords are lowercased before comparing (the table holds ``Ok``,
    ``Err`` and ``Try``). Containment runs in both directions, so short
    symbol keywords such as ``-`` or ``!`` match any query that contains them.
    """
    if query_lower == topic.name:
        return True
    keywords = (k.lower() for k in topic.keywords)
    return any(k in query_lower or query_lower in k for k in keywords)


def resolve_topic(query: str, topics: Mapping[str, Topic] = TOPICS) -> str | None:
    """Map a free-text query to a topic name.

    Args:
        query: Topic name or keyword(s)
        topics: Ordered topic table

    Returns:
        The matched topic name, or None when nothing matches
    """
    query_lower = query.lower()

    # Every string contains "", so a blank query would match the first topic
    if not query_lower.strip():
        return None

    if query_lower in topics:
        return query_lower

    for name, topic in topics.items():
        if topic_matches(query_lower, topic):
            return name

    logger.debug(f"No topic matched query '{query}'")
    return None
