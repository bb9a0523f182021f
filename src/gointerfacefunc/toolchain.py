from __future__ import annotations

import os
import tempfile
from pathlib import Path


def go_executable() -> str:
    """Return the Go toolchain command used to run the source scanner.

    Override with `GOINTERFACEFUNC_GO` (a command on PATH or an absolute path).
    """
    override = os.environ.get("GOINTERFACEFUNC_GO")
    if override:
        return override
    return "go"


def scan_scratch_root() -> Path:
    """Return the parent directory for temporary scanner modules.

    Override with `GOINTERFACEFUNC_SCAN_DIR`.
    """
    override = os.environ.get("GOINTERFACEFUNC_SCAN_DIR")
    if override:
        return Path(override)
    return Path(tempfile.gettempdir())
