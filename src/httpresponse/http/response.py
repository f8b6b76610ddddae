r"""
=============================================================================
HTTP RESPONSE PARSER
=============================================================================

Parses a raw HTTP/1.x response, already read into one string, into a
structured HTTPResponse object.

=============================================================================
HTTP RESPONSE ANATOMY
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                     HTTP RESPONSE STRUCTURE                         │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │  ┌─ STATUS LINE ──────────────────────────────────────────────────┐ │
    │  │                                                                 │ │
    │  │    HTTP/1.1 404 Not Found\n                                     │ │
    │  │    ───┬──── ─┬─ ────┬────                                       │ │
    │  │       │      │      │                                           │ │
    │  │    Version  Code  Reason (may contain spaces)                   │ │
    │  │                                                                 │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    │  ┌─ HEADERS ──────────────────────────────────────────────────────┐ │
    │  │                                                                 │ │
    │  │    Content-Type: text/html\n                                    │ │
    │  │    Content-Length: 123\n                                        │ │
    │  │    Set-Cookie: a=1\n                                            │ │
    │  │    Set-Cookie: b=2\n          (duplicates kept, in order)       │ │
    │  │                                                                 │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    │  ┌─ EMPTY LINE (separator) ───────────────────────────────────────┐ │
    │  │    \n                                                           │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    │  ┌─ BODY ─────────────────────────────────────────────────────────┐ │
    │  │    <html>...</html>          (everything after the blank line)  │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
PARSING RULES
=============================================================================

1. LINE ENDINGS: "\n" is the line separator. The malformed "\n\r" pair is
   collapsed to "\n" first, which also turns a CRLF blank line
   ("\r\n\r\n") into something the "\n\n" split recognizes.

2. MISSING BLANK LINE: a response with no blank line is accepted. Every
   line after the status line becomes body and there are no headers.

3. REASON PHRASE: the status line is split into at most three parts, so
   "HTTP/1.1 404 Not Found" keeps "Not Found" intact.

4. HEADER NAMES: case is preserved. header_value() matches exactly;
   get_header(), get_all() and has_header() ignore case.

5. NO DECODING: chunked transfer-encoding, charsets and content-encoding
   are left to the caller. The body is returned as-is.

=============================================================================
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
import logging
import re

from ..config import DEFAULT_MAX_RESPONSE_SIZE, ParserConfig
from .errors import (
    HeaderNotFoundError,
    MalformedResponseError,
    NetworkError,
    ResponseTooLargeError,
)
from .header import Header
from .status_codes import HTTPStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTTPResponse:
    """
    Represents a parsed HTTP response.

    =========================================================================
    ATTRIBUTES
    =========================================================================

        version:      Protocol version from the status line ("HTTP/1.1")

        status_code:  Numeric status code (200, 404, ...)

        reason:       Reason phrase exactly as sent ("OK", "Not Found")

        headers:      Tuple of Header in the order they were received.
                      Same-named headers are all kept.

        body:         Everything after the blank line, untouched

    =========================================================================
    IMMUTABILITY
    =========================================================================

    The dataclass is frozen and headers is a tuple, so a parsed response
    can be handed to other threads or stored in a cache as-is. Two
    responses parsed from the same text compare equal.

    =========================================================================
    """

    version: str
    status_code: int
    reason: str
    headers: Tuple[Header, ...] = ()
    body: str = ""

    def __post_init__(self):
        object.__setattr__(self, "headers", tuple(self.headers))

    @classmethod
    def parse(cls, raw: str) -> "HTTPResponse":
        """Parse raw response text with default parser settings."""
        return ResponseParser().parse(raw)

    # =========================================================================
    # HEADER LOOKUP
    # =========================================================================

    def header_value(self, name: str) -> str:
        """
        Get the value of the first header named exactly ``name``.

        The comparison is case-sensitive: "content-type" does not find
        "Content-Type". Use get_header() for a case-insensitive lookup.

        Args:
            name: Header name, matched exactly.

        Returns:
            Value of the first matching header.

        Raises:
            HeaderNotFoundError: If no header has that name.
        """
        for header in self.headers:
            if header.name == name:
                return header.value
        raise HeaderNotFoundError(name)

    def get_header(self, name: str, default: str = "") -> str:
        """
        Get a header value (case-insensitive lookup).

        Example:
            response.get_header("content-type")   # "text/html"
            response.get_header("X-Missing", "-") # "-"
        """
        for header in self.headers:
            if header.matches(name):
                return header.value
        return default

    def get_all(self, name: str) -> List[str]:
        """
        Get every value of a header, in the order received.

        Example:
            # Set-Cookie: a=1
            # Set-Cookie: b=2
            response.get_all("Set-Cookie")  # ["a=1", "b=2"]
        """
        return [header.value for header in self.headers if header.matches(name)]

    def has_header(self, name: str) -> bool:
        return any(header.matches(name) for header in self.headers)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def status_line(self) -> str:
        """The status line as it would be written back: "HTTP/1.1 200 OK"."""
        return f"{self.version} {self.status_code} {self.reason}"

    @property
    def status(self) -> Optional[HTTPStatus]:
        """HTTPStatus member for the code, or None if the code is non-standard."""
        return HTTPStatus.lookup(self.status_code)

    @property
    def content_type(self) -> Optional[str]:
        """
        Content-Type without parameters.

        "text/html; charset=utf-8" is returned as "text/html".
        """
        content_type = self.get_header("Content-Type")
        return content_type.split(";")[0].strip().lower() or None

    @property
    def content_length(self) -> int:
        """Content-Length as an integer, 0 if missing or invalid."""
        try:
            return int(self.get_header("Content-Length", "0"))
        except ValueError:
            return 0

    @property
    def location(self) -> Optional[str]:
        """Redirect target from the Location header."""
        return self.get_header("Location") or None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_redirect(self) -> bool:
        return 300 <= self.status_code < 400

    @property
    def is_error(self) -> bool:
        return self.status_code >= 400

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-serializable dictionary.

        Headers become a list of [name, value] pairs so order and
        duplicates survive the round trip.
        """
        return {
            "version": self.version,
            "status_code": self.status_code,
            "reason": self.reason,
            "headers": [[header.name, header.value] for header in self.headers],
            "body": self.body,
        }


class ResponseParser:
    r"""
    Parses raw HTTP response text into HTTPResponse objects.

    ==========================================================================
    PARSER ARCHITECTURE
    ==========================================================================

        Raw response text
              │
              ▼
        ┌───────────────────────────────────────────────────────────────────┐
        │  RESPONSE PARSER                                                  │
        ├───────────────────────────────────────────────────────────────────┤
        │                                                                    │
        │  1. Size Check ──────────────────────────────────────────────────►│
        │     │  Too large? → ResponseTooLargeError                         │
        │     ▼                                                             │
        │  2. Normalize (strip leading whitespace, "\n\r" → "\n") ────────►│
        │     ▼                                                             │
        │  3. Split off Status Line at first "\n" ────────────────────────►│
        │     │  No "\n"? → NetworkError                                    │
        │     ▼                                                             │
        │  4. Split Headers / Body at first "\n\n" ───────────────────────►│
        │     │  No blank line? → no headers, everything is body            │
        │     ▼                                                             │
        │  5. Parse Headers ("Name: Value", split at first colon) ────────►│
        │     │  No colon? → MalformedResponseError                         │
        │     ▼                                                             │
        │  6. Parse Status Line (VERSION SP CODE SP REASON) ──────────────►│
        │     │  Wrong shape / bad code? → MalformedResponseError           │
        │     ▼                                                             │
        │  7. Build HTTPResponse ─────────────────────────────────────────►│
        │                                                                    │
        └───────────────────────────────────────────────────────────────────┘

    ==========================================================================
    """

    # Status codes are unsigned 32-bit integers
    STATUS_CODE_PATTERN = re.compile(r"[0-9]{1,10}")
    MAX_STATUS_CODE = 0xFFFFFFFF

    def __init__(self, max_response_size: int = DEFAULT_MAX_RESPONSE_SIZE):
        """
        Initialize the response parser.

        Args:
            max_response_size: Maximum accepted length of the raw text, in
                               characters. Default is 10 MB.
        """
        self.max_response_size = max_response_size

    @classmethod
    def from_config(cls, config: ParserConfig) -> "ResponseParser":
        return cls(max_response_size=config.max_response_size)

    def parse(self, raw: str) -> HTTPResponse:
        """
        Parse raw HTTP response text into an HTTPResponse object.

        Args:
            raw: The complete response: status line, headers and body.

        Returns:
            Parsed HTTPResponse object.

        Raises:
            ResponseTooLargeError: If raw is longer than the size limit.
            NetworkError: If raw contains no line separator.
            MalformedResponseError: If the status line or a header line
                                    is malformed.
        """
        if len(raw) > self.max_response_size:
            logger.debug(f"Rejected response of {len(raw)} characters")
            raise ResponseTooLargeError(len(raw), self.max_response_size)

        text = raw.lstrip().replace("\n\r", "\n")

        status_line, separator, remaining = text.partition("\n")
        if not separator:
            logger.debug("Rejected response without a line separator")
            raise NetworkError(text)

        header_block, body = self._split_head(remaining)
        headers = self._parse_headers(header_block)
        version, status_code, reason = self._parse_status_line(status_line)

        logger.debug(
            f"Parsed response: {version} {status_code} {reason} "
            f"({len(headers)} headers, {len(body)} characters of body)"
        )

        return HTTPResponse(
            version=version,
            status_code=status_code,
            reason=reason,
            headers=tuple(headers),
            body=body,
        )

    def _split_head(self, remaining: str) -> Tuple[str, str]:
        r"""
        Split the text after the status line into (header block, body).

        A blank line right after the status line leaves remaining starting
        with "\n"; that is an empty header block, not a missing one.
        """
        if remaining.startswith("\n"):
            return "", remaining[1:]

        header_block, separator, body = remaining.partition("\n\n")
        if not separator:
            return "", remaining

        return header_block, body

    def _parse_status_line(self, line: str) -> Tuple[str, int, str]:
        """
        Parse "VERSION SP CODE SP REASON" into its three parts.

        Raises:
            MalformedResponseError: On fewer than three parts or a status
                                    code that is not an unsigned 32-bit integer.
        """
        line = line.rstrip("\r")

        parts = line.split(" ", 2)
        if len(parts) != 3:
            logger.debug(f"Rejected status line: {line!r}")
            raise MalformedResponseError(f"Invalid status line: {line!r}", line)

        version, code, reason = parts
        if not self.STATUS_CODE_PATTERN.fullmatch(code):
            logger.debug(f"Rejected status code: {code!r}")
            raise MalformedResponseError(f"Invalid status code: {code!r}", line)

        status_code = int(code)
        if status_code > self.MAX_STATUS_CODE:
            logger.debug(f"Rejected out-of-range status code: {code!r}")
            raise MalformedResponseError(f"Status code out of range: {code!r}", line)

        return version, status_code, reason

    def _parse_headers(self, block: str) -> List[Header]:
        """
        Parse the header block into Header objects, keeping order.

        Blank lines are skipped. Each other line is split at its first
        colon, so "Date: Tue, 20 Jan 2026 13:45:00 GMT" keeps the colons
        in its value.

        Raises:
            MalformedResponseError: If a line has no colon.
        """
        headers: List[Header] = []

        for line in block.split("\n"):
            if not line.strip():
                continue

            name, separator, value = line.partition(":")
            if not separator:
                logger.debug(f"Rejected header line: {line!r}")
                raise MalformedResponseError(f"Invalid header line: {line!r}", line)

            headers.append(Header(name, value))

        return headers


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

def parse_response(raw: str, max_size: int = DEFAULT_MAX_RESPONSE_SIZE) -> HTTPResponse:
    """
    Convenience function to parse an HTTP response.

    Use ResponseParser directly to parse many responses with the same
    settings.
    """
    parser = ResponseParser(max_response_size=max_size)
    return parser.parse(raw)
