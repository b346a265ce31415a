#!/usr/bin/env python3
"""Configuration dataclasses for github2mr."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from errors import ConfigError

VERSION = "1.0.0"
PROCESS_NAME = "github2mr"

DEFAULT_API_URL = "https://api.github.com/"
TOKEN_ENV_VAR = "GITHUB_TOKEN"

# Repositories requested per API page
PAGE_SIZE = 50
DEFAULT_TIMEOUT_S = 30


class Scope(Enum):
    """Visibility selector applied to a repository listing."""
    PUBLIC = "public"
    PRIVATE = "private"
    ALL = "all"
    NONE = "none"

    @classmethod
    def parse(cls, value: str) -> "Scope":
        try:
            return cls(value)
        except ValueError:
            raise ConfigError(
                f"invalid scope '{value}': valid settings are "
                "'public', 'private', 'none', or 'all'"
            ) from None


class CloneMethod(Enum):
    """Enumeration for git clone methods."""
    HTTPS = "https"
    SSH = "ssh"


class AuthHeader(Enum):
    """Authorization header style sent with the API token."""
    BEARER = "bearer"
    TOKEN = "token"


@dataclass
class ApiConfig:
    """Remote API configuration."""
    url: str
    token: str
    auth_header: AuthHeader = AuthHeader.BEARER
    timeout_s: int = DEFAULT_TIMEOUT_S


@dataclass
class FetchConfig:
    """Which repository sources to enumerate."""
    personal: Scope = Scope.ALL
    organizations: Scope = Scope.ALL
    page_size: int = PAGE_SIZE


@dataclass
class ManifestConfig:
    """Per-entry filtering and formatting settings."""
    prefix: str
    include_archived: bool = False
    clone_method: CloneMethod = CloneMethod.SSH
    ssh_prefix: bool = False
    exclude: Optional[str] = None


@dataclass
class OutputConfig:
    """Where the rendered manifest goes; None means standard output."""
    path: Optional[str] = None


@dataclass
class Config:
    """Main configuration for a github2mr run."""
    api: ApiConfig
    fetch: FetchConfig
    manifest: ManifestConfig
    output: OutputConfig
    verbose: bool = False
