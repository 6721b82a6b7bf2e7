"""Tests for URI parsing."""

import pytest

from urshort.services.mapping import InvalidURIError, parse_uri


class TestParseURI:
    """Test suite for parse_uri."""

    @pytest.mark.parametrize(
        "value",
        [
            "https://example.com/",
            "https://example.com/a?b=c&d=e#frag",
            "http://user@example.com:8080/path",
            "https://example.com/%E2%9C%93",
            "/relative/path",
            "example.com",
        ],
    )
    def test_accepts_valid_uri(self, value):
        """Valid URIs parse and keep their text."""
        assert str(parse_uri(value)) == value

    @pytest.mark.parametrize("value", ["a:b/c", "//example.com/x:y", "/x:y", "x/y:z"])
    def test_accepts_colon_outside_relative_first_segment(self, value):
        """A colon is allowed after a scheme or past the first segment."""
        parse_uri(value)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "Jaina Solo",
            "https://example.com/a b",
            "https://example.com/<script>",
            "https://example.com/%zz",
            "https://example.com/é",
            "://x",
            "1abc:x",
        ],
    )
    def test_rejects_invalid_uri(self, value):
        """Empty strings, disallowed characters and a colon in a relative first segment are rejected."""
        with pytest.raises(InvalidURIError):
            parse_uri(value)

    def test_rejects_non_numeric_port(self):
        """A malformed port is rejected."""
        with pytest.raises(InvalidURIError):
            parse_uri("http://example.com:abc/")

    def test_error_carries_value(self):
        """The rejected value is kept on the error."""
        with pytest.raises(InvalidURIError) as exc_info:
            parse_uri("a b")
        assert exc_info.value.value == "a b"
        assert isinstance(exc_info.value, ValueError)

