"""
Unit tests for the Header type.
"""

import dataclasses

import pytest

from httpresponse.http.header import Header


class TestHeader:
    """Tests for Header dataclass."""

    def test_fields_are_trimmed(self):
        """Test that surrounding whitespace is removed from both fields."""
        header = Header("  Content-Type ", "  text/html\r")

        assert header.name == "Content-Type"
        assert header.value == "text/html"

    def test_empty_fields_allowed(self):
        """Test that empty names and values are accepted."""
        header = Header("", "")

        assert header.name == ""
        assert header.value == ""

    def test_immutable(self):
        """Test that fields cannot be reassigned."""
        header = Header("Server", "nginx")

        with pytest.raises(dataclasses.FrozenInstanceError):
            header.value = "apache"

    def test_equality(self):
        """Test structural equality after trimming."""
        assert Header("Server", " nginx ") == Header("Server", "nginx")
        assert Header("Server", "nginx") != Header("server", "nginx")

    def test_matches_ignores_case(self):
        """Test case-insensitive name matching."""
        header = Header("Content-Length", "12")

        assert header.matches("content-length")
        assert header.matches("CONTENT-LENGTH")
        assert not header.matches("Content-Type")

    def test_str(self):
        """Test rendering as a header line."""
        assert str(Header("Server", "nginx")) == "Server: nginx"
