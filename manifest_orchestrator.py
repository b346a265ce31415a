#!/usr/bin/env python3
"""Main orchestrator: login, discover, filter, sort, render and write."""

from __future__ import annotations

from typing import List, Optional

from config import Config
from errors import (EXIT_EXECUTION_ERROR, EXIT_SUCCESS, AuthError,
                    Github2MrError)
from github_session import Session
from logging_utils import Logger
from manifest import build_entries, render_manifest, sort_entries
from output import write_manifest
from repository_fetcher import (RepositoryRecord, fetch_organizational,
                                fetch_personal)


class ManifestOrchestrator:
    def __init__(self, cfg: Config) -> None:
        self.cfg = cfg
        self.session: Optional[Session] = None

    def run(self) -> int:
        try:
            self.session = Session.connect(self.cfg.api, self.cfg.fetch.page_size)
            records = self._discover(self.session)
            text = self._generate(records)
            write_manifest(text, self.cfg.output.path)
            return EXIT_SUCCESS
        except AuthError as e:
            Logger.error(f"login error - is your token set/correct? {e}")
            return e.exit_code
        except Github2MrError as e:
            Logger.error(str(e))
            return e.exit_code
        except Exception as e:
            Logger.error(f"unexpected error: {e}")
            return EXIT_EXECUTION_ERROR

    def _discover(self, session: Session) -> List[RepositoryRecord]:
        """Return personal repositories followed by organizational ones."""
        personal = fetch_personal(session, self.cfg.fetch.personal)
        organizational = fetch_organizational(session, self.cfg.fetch.organizations)
        return personal + organizational

    def _generate(self, records: List[RepositoryRecord]) -> str:
        entries = sort_entries(build_entries(records, self.cfg.manifest))
        Logger.info(f"{len(entries)} of {len(records)} repositories in manifest")
        return render_manifest(entries)
