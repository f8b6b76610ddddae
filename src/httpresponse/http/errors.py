"""
=============================================================================
PARSE ERRORS
=============================================================================

Every way a raw response can be rejected maps to one exception class.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                        ERROR HIERARCHY                              │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Exception                                                         │
    │   └── HTTPParseError            any rejected response text          │
    │       ├── NetworkError          no line boundary at all             │
    │       ├── MalformedResponseError bad status line / header line      │
    │       └── ResponseTooLargeError input exceeds the size limit        │
    │                                                                      │
    │   LookupError                                                       │
    │   └── HeaderNotFoundError       header_value() found no match       │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Callers that only care "did it parse?" catch HTTPParseError. Malformed
upstream input never surfaces as a bare IndexError or ValueError.

=============================================================================
"""

from typing import Optional


class HTTPParseError(Exception):
    """
    Raised when raw response text cannot be turned into an HTTPResponse.

    Base class for every parse failure, so a single except clause covers
    the whole taxonomy.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkError(HTTPParseError):
    """
    The raw text has no line separator between status line and the rest.

    Usually means the transport handed over a truncated read. The offending
    text is kept on ``raw`` for diagnostics.
    """

    def __init__(self, raw: str):
        super().__init__(f"invalid http response: {raw}")
        self.raw = raw


class MalformedResponseError(HTTPParseError):
    """
    A status line or header line does not have the expected shape.

    ``line`` holds the line that was rejected.
    """

    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message)
        self.line = line


class ResponseTooLargeError(HTTPParseError):
    """Raw text is longer than the parser's configured limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(f"Response too large: {size} characters (limit {limit})")
        self.size = size
        self.limit = limit


class HeaderNotFoundError(LookupError):
    """
    Raised by HTTPResponse.header_value() when no header has the name.

    ``name`` is the header that was asked for.
    """

    def __init__(self, name: str):
        super().__init__(f"failed to find {name} in headers")
        self.name = name
