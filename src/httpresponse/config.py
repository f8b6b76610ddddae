"""
=============================================================================
PARSER CONFIGURATION
=============================================================================

Centralized configuration for the response parser and its CLI.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Command-line arguments                                         │
    │      └── python -m httpresponse --max-size 65536 response.txt      │
    │                                                                      │
    │   2. Environment variables                                          │
    │      └── HTTPRESPONSE_MAX_SIZE=65536 python -m httpresponse ...    │
    │                                                                      │
    │   3. Defaults below                                                 │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import os
from dataclasses import dataclass


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_MAX_RESPONSE_SIZE = 10 * 1024 * 1024  # 10 MB


@dataclass
class ParserConfig:
    """
    Configuration for ResponseParser and the command-line tool.

    Development:
        ParserConfig(log_level="DEBUG")

    Proxy or crawler reading untrusted upstreams:
        ParserConfig(max_response_size=1024 * 1024)
    """

    max_response_size: int = DEFAULT_MAX_RESPONSE_SIZE
    """
    Largest raw response (in characters) the parser accepts.
    Longer input is rejected with ResponseTooLargeError before any
    splitting happens.
    """

    log_level: str = "WARNING"
    """
    Logging level for the CLI (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    DEBUG shows one line per parsed or rejected response.
    """

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """
        Create configuration from environment variables.

            HTTPRESPONSE_MAX_SIZE   Size limit in characters (default: 10 MB)
            HTTPRESPONSE_LOG_LEVEL  Logging level (default: WARNING)
        """
        return cls(
            max_response_size=int(
                os.getenv("HTTPRESPONSE_MAX_SIZE", str(DEFAULT_MAX_RESPONSE_SIZE))
            ),
            log_level=os.getenv("HTTPRESPONSE_LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> None:
        """Fail fast on values the parser cannot work with."""
        if self.max_response_size < 1:
            raise ValueError(
                f"max_response_size must be >= 1, got {self.max_response_size}"
            )

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {', '.join(LOG_LEVELS)}."
            )
