#!/usr/bin/env python3
"""URL helpers for github2mr."""

import os
from typing import Optional
from urllib.parse import urlparse

PUBLIC_API_HOST = "api.github.com"
PUBLIC_GIT_HOST = "github.com"
ENTERPRISE_API_SUFFIX = "/api/v3"


def is_public_api(api_url: str) -> bool:
    return api_url.strip().rstrip("/") == f"https://{PUBLIC_API_HOST}"


def normalize_api_url(api_url: str) -> str:
    """Return the base URL handed to the API client.

    The public endpoint is used as is; self-hosted instances need the
    versioned API path appended when the caller left it out.
    Example: 'https://git.example.com/' -> 'https://git.example.com/api/v3'
    """
    base = api_url.strip().rstrip("/")
    if is_public_api(base):
        return base
    if not base.endswith(ENTERPRISE_API_SUFFIX):
        base += ENTERPRISE_API_SUFFIX
    return base


def git_hostname(api_url: str) -> str:
    """Return the git host for an API endpoint."""
    host = urlparse(api_url.strip()).hostname or ""
    if host == PUBLIC_API_HOST:
        return PUBLIC_GIT_HOST
    return host


def default_prefix(api_url: str, home: Optional[str] = None) -> str:
    """Return the default local directory prefix: '<home>/Repos/<git host>'."""
    if home is None:
        home = os.environ.get("HOME") or os.path.expanduser("~")
    return f"{home}/Repos/{git_hostname(api_url)}"
