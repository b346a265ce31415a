#!/usr/bin/env python3
"""
github2mr - Generate an mr (myrepos) configuration file listing every
repository visible to a github, or github-compatible, account.

This tool logs in with an API token, discovers personal and organizational
repositories, filters out archived and excluded ones, and writes one
'checkout = git clone ...' block per repository, sorted by name.
It never clones anything itself.

Licensed under the MIT License. See LICENSE file for details.

License: MIT
"""

from __future__ import annotations

import sys
from typing import List, NoReturn, Optional

from argument_parser import parse_arguments
from errors import ConfigError
from logging_utils import Logger
from manifest_orchestrator import ManifestOrchestrator


def main(argv: Optional[List[str]] = None) -> NoReturn:
    try:
        cfg = parse_arguments(argv)
    except ConfigError as e:
        Logger.error(str(e))
        sys.exit(e.exit_code)

    Logger.set_verbose(cfg.verbose)
    orchestrator = ManifestOrchestrator(cfg)
    sys.exit(orchestrator.run())


if __name__ == "__main__":
    main()
