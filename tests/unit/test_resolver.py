"""Unit tests for topic resolution."""

import pytest

from roc_syntax.engine.topics import TOPICS, Topic, resolve_topic, topic_matches


class TestResolveTopic:
    """Tests for resolve_topic."""

    @pytest.mark.parametrize("name", list(TOPICS))
    def test_topic_name_resolves_to_itself(self, name):
        """Test that every topic name resolves to its own topic."""
        assert resolve_topic(name) == name

    @pytest.mark.parametrize(
        "query,expected",
        [
            ("pattern matching", "pattern_matching"),
            ("match", "pattern_matching"),
            ("list", "list_patterns"),
            ("string", "strings"),
            ("effect", "effects"),
            ("loop", "loops"),
            ("if", "conditionals"),
            ("tuple", "tuples"),
            ("type", "types"),
            ("number", "numbers"),
            ("opaque", "opaque"),
            ("nominal", "nominal"),
            ("lambda", "functions"),
            ("module", "imports"),
            ("expect", "testing"),
        ],
    )
    def test_keyword_resolves_to_owning_topic(self, query, expected):
        """Test keywords that no earlier topic captures."""
        assert resolve_topic(query) == expected

    @pytest.mark.parametrize(
        "query,expected",
        [
            # "or" is an operators keyword and a substring of these
            ("for", "operators"),
            ("record", "operators"),
            ("import", "operators"),
            # "io" (effects) is inside "union"
            ("io", "tag_unions"),
            # "-" is an operators keyword
            ("xyz-no-such-topic", "operators"),
        ],
    )
    def test_earlier_topic_wins(self, query, expected):
        """Test that table order decides between overlapping topics."""
        assert resolve_topic(query) == expected

    def test_query_is_lowercased(self):
        """Test that matching ignores query case."""
        assert resolve_topic("PATTERN") == "pattern_matching"
        assert resolve_topic("Tuples") == "tuples"

    @pytest.mark.parametrize(
        "name,keyword", [(name, k) for name, topic in TOPICS.items() for k in topic.keywords]
    )
    def test_every_keyword_resolves_to_own_or_earlier_topic(self, name, keyword):
        """Test that no keyword in the table is unreachable."""
        order = list(TOPICS)
        resolved = resolve_topic(keyword)
        assert resolved is not None
        assert order.index(resolved) <= order.index(name)

    @pytest.mark.parametrize("query", ["Ok", "ok", "Err", "try"])
    def test_mixed_case_keywords(self, query):
        """Test that capitalized keywords match regardless of case."""
        assert resolve_topic(query) == "tag_unions"

    def test_query_contained_in_keyword(self):
        """Test the keyword-contains-query direction."""
        # "interp" is only a prefix of the strings keyword "interpolation"
        assert resolve_topic("interp") == "strings"

    @pytest.mark.parametrize("query", ["", "   ", "zzz", "xyz_no_such_topic"])
    def test_no_match(self, query):
        """Test that unrelated or blank queries resolve to nothing."""
        assert resolve_topic(query) is None

    def test_custom_table_order(self):
        """Test first-match over a caller-supplied table."""
        table = {
            "first": Topic("first", ("shared",), "First"),
            "second": Topic("second", ("shared", "own"), "Second"),
        }
        assert resolve_topic("shared", table) == "first"
        assert resolve_topic("own", table) == "second"
        assert resolve_topic("second", table) == "second"


class TestTopicTable:
    """Tests for the static topic table."""

    def test_table_size_and_order(self):
        """Test the declared topics and their order."""
        assert list(TOPICS) == [
            "operators",
            "pattern_matching",
            "list_patterns",
            "tag_unions",
            "strings",
            "effects",
            "loops",
            "conditionals",
            "tuples",
            "records",
            "types",
            "numbers",
            "opaque",
            "nominal",
            "functions",
            "imports",
            "testing",
        ]

    def test_table_is_read_only(self):
        """Test that the topic table cannot be mutated."""
        with pytest.raises(TypeError):
            TOPICS["extra"] = Topic("extra", (), "")

    def test_topic_matches(self):
        """Test single-topic matching in both containment directions."""
        topic = TOPICS["loops"]
        assert topic_matches("loops", topic)
        assert topic_matches("for each item", topic)
        assert topic_matches("iter", topic)
        assert not topic_matches("zzz", topic)
