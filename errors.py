#!/usr/bin/env python3
"""Error types for github2mr; each carries the exit code reported on failure."""

from __future__ import annotations

# Exit codes
EXIT_SUCCESS = 0
EXIT_EXECUTION_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_FETCH_ERROR = 30
EXIT_AUTH_ERROR = 40
EXIT_RENDER_ERROR = 50
EXIT_OUTPUT_ERROR = 60


class Github2MrError(Exception):
    """Base class for failures that end the run with a diagnostic."""

    exit_code = EXIT_EXECUTION_ERROR


class ConfigError(Github2MrError):
    """Invalid option value or missing credential."""

    exit_code = EXIT_CONFIG_ERROR


class AuthError(Github2MrError):
    """Credential rejected, or the endpoint did not behave like the API."""

    exit_code = EXIT_AUTH_ERROR


class FetchError(Github2MrError):
    """A repository or organization listing call failed."""

    exit_code = EXIT_FETCH_ERROR


class RenderError(Github2MrError):
    exit_code = EXIT_RENDER_ERROR


class OutputError(Github2MrError):
    exit_code = EXIT_OUTPUT_ERROR
