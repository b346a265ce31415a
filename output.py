#!/usr/bin/env python3
"""Write the rendered manifest to a file or to standard output."""

from __future__ import annotations

import os
import sys
import tempfile
from typing import Optional

from errors import OutputError
from logging_utils import Logger


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def write_manifest(text: str, path: Optional[str] = None) -> None:
    if not path:
        sys.stdout.write(text + "\n")
        sys.stdout.flush()
        return

    directory = os.path.dirname(os.path.abspath(path))
    tmp_path: Optional[str] = None
    try:
        fd, tmp_path = tempfile.mkstemp(
            prefix=".github2mr_", suffix=".tmp", dir=directory, text=True
        )
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        # mkstemp creates 0600; give the manifest the usual umask-based mode
        os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, path)
        tmp_path = None
    except OSError as e:
        raise OutputError(f"failed to write {path}: {e}") from e
    finally:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)

    Logger.info(f"wrote manifest: {path}")
