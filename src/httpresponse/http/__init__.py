r"""
=============================================================================
HTTP PROTOCOL COMPONENTS
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │ RESPONSE PARSING (response.py)                                      │
    │ ─────────────────────────────────────────────────────────────────── │
    │ Raw text → HTTPResponse(version, status_code, reason, headers, body)│
    │                                                                      │
    │ Input:   "HTTP/1.1 200 OK\nContent-Type: text/html\n\n<html>..."   │
    │ Output:  HTTPResponse(version="HTTP/1.1", status_code=200, ...)     │
    └─────────────────────────────────────────────────────────────────────┘

    ┌─────────────────────────────────────────────────────────────────────┐
    │ HEADERS (header.py)                                                 │
    │ ─────────────────────────────────────────────────────────────────── │
    │ Immutable Header(name, value) pairs, kept in received order         │
    └─────────────────────────────────────────────────────────────────────┘

    ┌─────────────────────────────────────────────────────────────────────┐
    │ ERRORS (errors.py)                                                  │
    │ ─────────────────────────────────────────────────────────────────── │
    │ HTTPParseError and subclasses, HeaderNotFoundError                  │
    └─────────────────────────────────────────────────────────────────────┘

    ┌─────────────────────────────────────────────────────────────────────┐
    │ STATUS CODES (status_codes.py)                                      │
    │ ─────────────────────────────────────────────────────────────────── │
    │ HTTPStatus enum with standard reason phrases                        │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from .errors import (
    HTTPParseError,
    NetworkError,
    MalformedResponseError,
    ResponseTooLargeError,
    HeaderNotFoundError,
)
from .header import Header
from .response import HTTPResponse, ResponseParser, parse_response
from .status_codes import HTTPStatus

__all__ = [
    # Response parsing
    "HTTPResponse",
    "ResponseParser",
    "parse_response",
    "Header",

    # Errors
    "HTTPParseError",
    "NetworkError",
    "MalformedResponseError",
    "ResponseTooLargeError",
    "HeaderNotFoundError",

    # Status codes
    "HTTPStatus",
]
