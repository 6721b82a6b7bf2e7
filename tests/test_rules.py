"""Tests for pattern rules and template expansion."""

import re

from urshort.services.mapping import PatternRule, expand_template


def _expand(pattern: str, key: str, template: str) -> str:
    match = re.search(pattern, key)
    assert match is not None
    return expand_template(match, template)


class TestExpandTemplate:
    """Test suite for group references in templates."""

    def test_numbered_group(self):
        assert _expand(r"^i(\d+)$", "i42", "https://example.com/$1") == "https://example.com/42"

    def test_whole_match(self):
        assert _expand(r"\d+", "i42", "n$0") == "n42"

    def test_named_group(self):
        result = _expand(r"^i(?P<index>\d+)$", "i1212", "https://example.com/$index")
        assert result == "https://example.com/1212"

    def test_braced_references(self):
        assert _expand(r"(?P<n>\d+)", "42", "${1}a-${n}b") == "42a-42b"

    def test_bare_reference_is_greedy(self):
        """$1a names the group '1a', which does not exist."""
        assert _expand(r"(\d+)", "42", "x$1a") == "x"

    def test_missing_group_expands_to_empty(self):
        assert _expand(r"(\d+)", "42", "[$9][$name]") == "[][]"

    def test_non_participating_group_expands_to_empty(self):
        assert _expand(r"(a)?b", "b", "[${1}]") == "[]"

    def test_escaped_dollar(self):
        assert _expand(r"(\d+)", "42", "$$1 costs $$") == "$1 costs $"

    def test_lone_dollar_is_literal(self):
        assert _expand(r"(\d+)", "42", "$1$") == "42$"
        assert _expand(r"(\d+)", "42", "a $ b") == "a $ b"


class TestPatternRule:
    """Test suite for applying a rule to a key."""

    def test_no_match(self):
        rule = PatternRule(re.compile(r"^i(\d+)$"), "https://example.com/$1")
        assert rule.apply("i12.12") is None

    def test_replaces_only_the_match(self):
        """Text around the first match is kept."""
        rule = PatternRule(re.compile(r"\d+"), "<$0>")
        assert rule.apply("a1b2") == "a<1>b2"

    def test_empty_match_prefixes_key(self):
        rule = PatternRule(re.compile("a*"), "https://example.com/")
        assert rule.apply("xyz") == "https://example.com/xyz"

    def test_names_swapped(self):
        rule = PatternRule(re.compile(r"(?P<last>[^,\s]+),\s+(?P<first>\S+)"), "$first $last")
        assert rule.apply("Solo, Jaina") == "Jaina Solo"

    def test_str(self):
        rule = PatternRule(re.compile(r"^i(\d+)$"), "https://example.com/$1")
        assert str(rule) == r"^i(\d+)$ https://example.com/$1"
