r"""
=============================================================================
HTTPRESPONSE - Raw HTTP/1.x Response Parser
=============================================================================

Turns the text of an HTTP/1.x response, as read from a socket or a
fixture file, into a structured, immutable HTTPResponse.

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    httpresponse/
    ├── __init__.py          # This file - package exports
    ├── __main__.py          # CLI entry point (python -m httpresponse)
    ├── config.py            # ParserConfig dataclass
    └── http/                # HTTP protocol components
        ├── response.py      # HTTPResponse + ResponseParser
        ├── header.py        # Header name/value pair
        ├── errors.py        # Parse error hierarchy
        └── status_codes.py  # HTTPStatus enum

=============================================================================
QUICK START
=============================================================================

    from httpresponse import parse_response

    response = parse_response(
        "HTTP/1.1 200 OK\n"
        "Content-Type: text/html\n"
        "\n"
        "<html>hello</html>"
    )

    response.status_code                    # 200
    response.header_value("Content-Type")   # "text/html"
    response.body                           # "<html>hello</html>"

The package performs no I/O. Reading the bytes off the network and
decoding them to text is the caller's job.

=============================================================================
"""

__version__ = "1.0.0"

from .config import ParserConfig
from .http import (
    HTTPResponse,
    ResponseParser,
    parse_response,
    Header,
    HTTPParseError,
    NetworkError,
    MalformedResponseError,
    ResponseTooLargeError,
    HeaderNotFoundError,
    HTTPStatus,
)

__all__ = [
    "HTTPResponse",
    "ResponseParser",
    "parse_response",
    "Header",
    "HTTPParseError",
    "NetworkError",
    "MalformedResponseError",
    "ResponseTooLargeError",
    "HeaderNotFoundError",
    "HTTPStatus",
    "ParserConfig",
    "__version__",
]
