#!/usr/bin/env python3
"""Authenticated GitHub API session."""

from __future__ import annotations

from typing import TYPE_CHECKING

import github
import requests

if TYPE_CHECKING:
    from github.AuthenticatedUser import AuthenticatedUser

from config import PAGE_SIZE, ApiConfig, AuthHeader
from errors import AuthError
from logging_utils import Logger
from utils import normalize_api_url


class BearerToken(github.Auth.Token):
    """Token auth sending 'Authorization: Bearer <token>'."""

    @property
    def token_type(self) -> str:
        return "Bearer"


def make_auth(token: str, auth_header: AuthHeader) -> github.Auth.Token:
    # gitbucket only accepts 'Authorization: token <token>'
    if auth_header == AuthHeader.TOKEN:
        return github.Auth.Token(token)
    return BearerToken(token)


class Session:
    """An authenticated API client bound to one endpoint.

    Passed explicitly to every fetch call; holds no global state.
    """

    def __init__(
        self,
        api: github.Github,
        user: "AuthenticatedUser",
        login: str,
        base_url: str,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self.api = api
        self.user = user
        self.login = login
        self.base_url = base_url
        self.page_size = page_size

    @classmethod
    def connect(cls, config: ApiConfig, page_size: int = PAGE_SIZE) -> "Session":
        """Build a client and verify the credential by reading our own login."""
        base_url = normalize_api_url(config.url)
        Logger.info(f"init github API: {base_url}")
        try:
            api = github.Github(
                auth=make_auth(config.token, config.auth_header),
                base_url=base_url,
                timeout=config.timeout_s,
                per_page=page_size,
                retry=None,
            )
            user = api.get_user()
            login = user.login
        except github.BadCredentialsException as e:
            raise AuthError(f"authentication failed: invalid token ({e.status})") from e
        except github.GithubException as e:
            raise AuthError(f"failed to fetch user information: {e}") from e
        except requests.RequestException as e:
            raise AuthError(f"failed to contact github api: {e}") from e

        if not login:
            raise AuthError(
                "failed to find our username, which suggests our login failed"
            )

        Logger.debug(f"logged in as: {login}")
        return cls(api, user, login, base_url, page_size)
