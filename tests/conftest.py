"""
pytest configuration and fixtures.
"""

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httpresponse import ParserConfig


@pytest.fixture
def sample_html_response() -> str:
    """Sample 200 response with headers and an HTML body."""
    return (
        "HTTP/1.1 200 OK\n"
        "Content-Type: text/html; charset=utf-8\n"
        "Content-Length: 26\n"
        "Date: Tue, 20 Jan 2026 13:45:00 GMT\n"
        "\n"
        "<html><p>hello</p></html>\n"
    )


@pytest.fixture
def sample_redirect_response() -> str:
    """Sample 301 redirect with a multi-word reason phrase."""
    return (
        "HTTP/1.1 301 Moved Permanently\n"
        "Location: https://example.com/new\n"
        "Content-Length: 0\n"
        "\n"
    )


@pytest.fixture
def sample_crlf_response() -> str:
    """Sample response using CRLF line endings, as sent on the wire."""
    return (
        "HTTP/1.1 404 Not Found\r\n"
        "Content-Type: text/plain\r\n"
        "Server: nginx\r\n"
        "\r\n"
        "missing"
    )


@pytest.fixture
def config() -> ParserConfig:
    """Default test parser configuration."""
    return ParserConfig(max_response_size=1024, log_level="DEBUG")


@pytest.fixture
def response_file(tmp_path: Path, sample_html_response: str) -> Path:
    """Sample response written to disk for CLI tests."""
    path = tmp_path / "response.txt"
    path.write_text(sample_html_response, encoding="utf-8")
    return path
