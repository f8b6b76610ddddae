"""
HTTP header field.

A header is one "Name: value" line from the header block of a response:

    Content-Type: text/html; charset=utf-8
    ─────┬──────  ───────────┬────────────
         │                   │
       Name                Value

Names and values are stored exactly as they appeared, minus surrounding
whitespace. Case is preserved; see Header.matches() for comparisons that
ignore it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Header:
    """
    An immutable name/value pair.

    Both fields are trimmed on construction and cannot be reassigned
    afterwards.
    """

    name: str
    value: str

    def __post_init__(self):
        # Frozen dataclasses need object.__setattr__ to normalize fields
        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "value", self.value.strip())

    def matches(self, name: str) -> bool:
        """Case-insensitive comparison against a header name."""
        return self.name.lower() == name.strip().lower()

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"
