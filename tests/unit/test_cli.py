"""
Unit tests for the command-line entry point.
"""

import io
import json
from pathlib import Path

import pytest

from httpresponse.__main__ import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's environment out of CLI configuration."""
    monkeypatch.delenv("HTTPRESPONSE_MAX_SIZE", raising=False)
    monkeypatch.delenv("HTTPRESPONSE_LOG_LEVEL", raising=False)


class TestMain:
    """Tests for main()."""

    def test_summary(self, response_file: Path, capsys):
        """Test default output: status line, headers, body size."""
        assert main([str(response_file)]) == 0

        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0] == "HTTP/1.1 200 OK"
        assert "Content-Type: text/html; charset=utf-8" in lines
        assert "(26 characters of body)" in out

    def test_body(self, response_file: Path, capsys):
        """Test printing the body."""
        assert main([str(response_file), "--body"]) == 0

        assert "<html><p>hello</p></html>" in capsys.readouterr().out

    def test_header(self, response_file: Path, capsys):
        """Test printing a single header value."""
        assert main([str(response_file), "--header", "Content-Length"]) == 0

        assert capsys.readouterr().out.strip() == "26"

    def test_header_missing(self, response_file: Path, capsys):
        """Test exit code 1 when the header is absent."""
        assert main([str(response_file), "-H", "X-Missing"]) == 1

        assert "failed to find X-Missing in headers" in capsys.readouterr().err

    def test_json(self, response_file: Path, capsys):
        """Test JSON output."""
        assert main([str(response_file), "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["status_code"] == 200
        assert data["headers"][0] == ["Content-Type", "text/html; charset=utf-8"]

    def test_stdin(self, monkeypatch, capsys):
        """Test reading the response from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("HTTP/1.1 204 No Content\n\n"))

        assert main(["-"]) == 0

        assert capsys.readouterr().out.startswith("HTTP/1.1 204 No Content")

    def test_crlf_file(self, tmp_path: Path, capsys):
        """Test that CRLF line endings in a file are handled."""
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"HTTP/1.1 200 OK\r\nServer: nginx\r\n\r\nhi")

        assert main([str(path), "-H", "Server"]) == 0

        assert capsys.readouterr().out.strip() == "nginx"

    def test_invalid_response(self, tmp_path: Path, capsys):
        """Test exit code 2 on a rejected response."""
        path = tmp_path / "bad.txt"
        path.write_text("HTTP/1.1 200 OK", encoding="utf-8")

        assert main([str(path)]) == 2

        assert "Error: invalid http response" in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path, capsys):
        """Test exit code 2 when the file cannot be read."""
        assert main([str(tmp_path / "nope.txt")]) == 2

        assert capsys.readouterr().err.startswith("Error:")

    def test_max_size(self, response_file: Path, capsys):
        """Test --max-size rejects large responses."""
        assert main([str(response_file), "--max-size", "10"]) == 2

        assert "too large" in capsys.readouterr().err

    def test_max_size_from_env(self, response_file: Path, monkeypatch, capsys):
        """Test that HTTPRESPONSE_MAX_SIZE is honoured."""
        monkeypatch.setenv("HTTPRESPONSE_MAX_SIZE", "10")

        assert main([str(response_file)]) == 2

    def test_invalid_config(self, response_file: Path, capsys):
        """Test exit code 2 on invalid configuration."""
        assert main([str(response_file), "--max-size", "0"]) == 2

        assert "max_response_size" in capsys.readouterr().err

    def test_invalid_env(self, response_file: Path, monkeypatch, capsys):
        """Test exit code 2 when the environment holds a bad size."""
        monkeypatch.setenv("HTTPRESPONSE_MAX_SIZE", "lots")

        assert main([str(response_file)]) == 2

        assert capsys.readouterr().err.startswith("Error:")

    def test_huge_status_code(self, tmp_path: Path, capsys):
        """Test exit code 2, not a traceback, on an overlong status code."""
        path = tmp_path / "huge.txt"
        path.write_text("HTTP/1.1 " + "9" * 5000 + " OK\n\n", encoding="utf-8")

        assert main([str(path)]) == 2

        assert "Invalid status code" in capsys.readouterr().err
