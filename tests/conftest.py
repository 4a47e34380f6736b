"""Shared fixtures for the syntax server tests."""

import pytest

from roc_syntax.config import DEFAULT_SYNTAX_FILE
from roc_syntax.engine import SyntaxEngine

SAMPLE_SYNTAX = "\n".join(
    [
        "app [main!] { pf: platform \"platform.tar.br\" }",
        "",
        "import pf.Stdout",
        "import Str",
        "",
        "simple_match : [A, B] -> Str",
        "simple_match = |tag|",
        "    match tag {",
        "        A => \"a\"",
        "        B => \"b\"",
        "    }",
        "",
        "expect simple_match(A) == \"a\"",
        "",
        "boolean_operators : Bool, Bool -> Bool",
        "boolean_operators = |a, b| a and b",
        "",
        "main! = |_| Stdout.line!(\"hi\")",
    ]
)


@pytest.fixture
def sample_syntax_file(tmp_path):
    """A small syntax reference written to a temporary file."""
    path = tmp_path / "sample.roc"
    path.write_text(SAMPLE_SYNTAX, encoding="utf-8")
    return path


@pytest.fixture
def sample_engine(sample_syntax_file):
    return SyntaxEngine(sample_syntax_file)


@pytest.fixture
def missing_engine(tmp_path):
    """Engine pointed at a file that does not exist."""
    return SyntaxEngine(tmp_path / "does_not_exist.roc")


@pytest.fixture
def packaged_text():
    return DEFAULT_SYNTAX_FILE.read_bytes().decode("utf-8")
