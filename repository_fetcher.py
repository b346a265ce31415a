#!/usr/bin/env python3
"""Repository discovery for the authenticated user and their organizations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List

import github
import requests

from config import Scope
from errors import FetchError
from github_session import Session
from logging_utils import Logger


@dataclass(frozen=True)
class RepositoryRecord:
    """One discovered repository."""
    full_name: str
    archived: bool
    ssh_url: str
    clone_url: str

    @classmethod
    def from_api(cls, repo: object) -> "RepositoryRecord":
        return cls(
            full_name=getattr(repo, "full_name", "") or "",
            archived=bool(getattr(repo, "archived", False)),
            ssh_url=getattr(repo, "ssh_url", "") or "",
            clone_url=getattr(repo, "clone_url", "") or "",
        )


def iter_personal_repositories(
    session: Session, scope: Scope
) -> Iterator[RepositoryRecord]:
    """Yield the user's repositories, page by page, in the order the host returns them."""
    for repo in session.user.get_repos(type=scope.value):
        yield RepositoryRecord.from_api(repo)


def iter_organizations(session: Session) -> Iterator[object]:
    yield from session.user.get_orgs()


def iter_organization_repositories(
    session: Session, scope: Scope
) -> Iterator[RepositoryRecord]:
    """Yield repositories of every organization we belong to.

    Organizations are visited in enumeration order; each one is paged
    independently until the host reports no next page.
    """
    for org in iter_organizations(session):
        login = getattr(org, "login", "")
        Logger.debug(f"getting repositories of organization: {login}")
        for repo in org.get_repos(type=scope.value):
            yield RepositoryRecord.from_api(repo)


def _drain(
    producer: Callable[[Session, Scope], Iterator[RepositoryRecord]],
    session: Session,
    scope: Scope,
    what: str,
) -> List[RepositoryRecord]:
    if scope == Scope.NONE:
        Logger.debug(f"skipping {what} repositories")
        return []

    Logger.info(f"discovering {what} repositories ({scope.value})")
    try:
        records = list(producer(session, scope))
    except github.GithubException as e:
        raise FetchError(f"failed to fetch {what} repository list: {e}") from e
    except requests.RequestException as e:
        raise FetchError(f"failed to fetch {what} repository list: {e}") from e

    Logger.info(f"found {len(records)} {what} repositories")
    return records


def fetch_personal(session: Session, scope: Scope) -> List[RepositoryRecord]:
    return _drain(iter_personal_repositories, session, scope, "personal")


def fetch_organizational(session: Session, scope: Scope) -> List[RepositoryRecord]:
    return _drain(iter_organization_repositories, session, scope, "organizational")
