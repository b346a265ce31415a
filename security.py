#!/usr/bin/env python3
"""Input validation and log redaction for github2mr."""

import re


class SecurityValidator:
    """Validation helpers for user-supplied options and log sanitization."""

    MAX_URL_LENGTH = 2048
    MAX_PATH_LENGTH = 4096
    MAX_TOKEN_LENGTH = 1024

    # Patterns to redact from anything we log
    REDACTION_PATTERNS = [
        (r"(https?://)[^:/@\s]+:[^@\s]+@", r"\1[REDACTED]@"),  # URLs with credentials
        (r"token\s*[=:]\s*[^\s]+", "token=[REDACTED]"),  # Token assignments
        (r"(authorization:\s*\w+\s+)[^\s]+", r"\1[REDACTED]"),  # Auth headers
        (r"gh[pousr]_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),  # GitHub tokens
        (r"github_pat_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),  # Fine-grained tokens
    ]

    @staticmethod
    def _has_control_chars(value: str) -> bool:
        return "\x00" in value or any(ord(c) < 32 for c in value)

    @classmethod
    def validate_api_url(cls, url: str) -> str:
        """Validate the API endpoint given on the command line."""
        if not url or not isinstance(url, str):
            raise ValueError("API URL must be a non-empty string")

        url = url.strip()
        if len(url) > cls.MAX_URL_LENGTH:
            raise ValueError(f"API URL exceeds maximum length of {cls.MAX_URL_LENGTH}")

        if cls._has_control_chars(url):
            raise ValueError("API URL contains null bytes or control characters")

        if not url.lower().startswith(("http://", "https://")):
            raise ValueError("API URL must use the http or https scheme")

        if not url.split("://", 1)[1].split("/", 1)[0]:
            raise ValueError("API URL has no host")

        return url

    @classmethod
    def validate_token(cls, token: str) -> str:
        if not token or not isinstance(token, str):
            raise ValueError("token must be a non-empty string")

        if len(token) > cls.MAX_TOKEN_LENGTH:
            raise ValueError(f"token exceeds maximum length of {cls.MAX_TOKEN_LENGTH}")

        if cls._has_control_chars(token) or any(c.isspace() for c in token):
            raise ValueError("token contains whitespace or control characters")

        return token

    @classmethod
    def validate_file_path(cls, path: str) -> str:
        """Validate an output file path."""
        if not path or not isinstance(path, str):
            raise ValueError("file path must be a non-empty string")

        if len(path) > cls.MAX_PATH_LENGTH:
            raise ValueError(
                f"file path exceeds maximum length of {cls.MAX_PATH_LENGTH}"
            )

        if "\x00" in path:
            raise ValueError("file path contains null bytes")

        return path

    @classmethod
    def sanitize_for_logging(cls, message: str) -> str:
        """Sanitize message for safe logging by removing potential credentials."""
        if not message:
            return message

        sanitized = str(message)
        for pattern, replacement in cls.REDACTION_PATTERNS:
            sanitized = re.sub(pattern, replacement, sanitized, flags=re.IGNORECASE)

        return sanitized
