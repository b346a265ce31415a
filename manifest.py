#!/usr/bin/env python3
"""Turn discovered repositories into an ordered, rendered mr manifest."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from string import Template
from typing import Iterable, List, Optional

from config import PROCESS_NAME, CloneMethod, ManifestConfig
from errors import RenderError
from logging_utils import Logger
from repository_fetcher import RepositoryRecord

SSH_SCHEME = "ssh://"

# Some self-hosted git services report 'host:4444:owner/repo' for a
# non-standard ssh port.
BROKEN_PORT_SEPARATOR = ":4444:"
FIXED_PORT_SEPARATOR = ":4444/"

HEADER_TEMPLATE = Template("# Generated by $tool - $count repositories\n\n")
ENTRY_TEMPLATE = Template("\n[$prefix/$name]\ncheckout = git clone $source\n")
FOOTER = "\n"


@dataclass(frozen=True)
class OutputEntry:
    """One manifest block."""
    prefix: str
    name: str
    source: str


def select_clone_url(
    record: RepositoryRecord, clone_method: CloneMethod, ssh_prefix: bool
) -> str:
    url = record.clone_url if clone_method == CloneMethod.HTTPS else record.ssh_url
    if ssh_prefix:
        url = SSH_SCHEME + url
    return url


def normalize_clone_url(url: str) -> str:
    return url.replace(BROKEN_PORT_SEPARATOR, FIXED_PORT_SEPARATOR)


def parse_exclusions(exclude: Optional[str]) -> List[str]:
    """Split a comma-separated exclusion list into case-folded terms.

    Example: ' Foo, ,bar ' -> ['foo', 'bar']
    """
    if not exclude:
        return []
    terms = (term.strip().casefold() for term in exclude.split(","))
    return [term for term in terms if term]


def is_excluded(url: str, terms: Iterable[str]) -> bool:
    folded = url.casefold()
    return any(term in folded for term in terms)


def build_entries(
    records: Iterable[RepositoryRecord], config: ManifestConfig
) -> List[OutputEntry]:
    """Filter records and project them to manifest entries.

    Records are expected personal first, then organizational. Duplicates
    across the two sources are kept.
    """
    terms = parse_exclusions(config.exclude)
    entries: List[OutputEntry] = []

    for record in records:
        if record.archived and not config.include_archived:
            Logger.debug(f"skipping archived: {record.full_name}")
            continue

        url = normalize_clone_url(
            select_clone_url(record, config.clone_method, config.ssh_prefix)
        )

        if is_excluded(url, terms):
            Logger.debug(f"excluding: {record.full_name}")
            continue

        entries.append(
            OutputEntry(prefix=config.prefix, name=record.full_name, source=url)
        )

    return entries


def sort_entries(entries: Iterable[OutputEntry]) -> List[OutputEntry]:
    """Order entries case-insensitively by name; ties keep their input order."""
    return sorted(entries, key=lambda entry: entry.name.casefold())


def render_manifest(entries: List[OutputEntry], tool: str = PROCESS_NAME) -> str:
    try:
        parts = [HEADER_TEMPLATE.substitute(tool=tool, count=len(entries))]
        parts.extend(ENTRY_TEMPLATE.substitute(asdict(entry)) for entry in entries)
    except (KeyError, TypeError, ValueError) as e:
        raise RenderError(f"error interpolating template: {e}") from e
    parts.append(FOOTER)
    return "".join(parts)
