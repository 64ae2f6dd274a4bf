# ffmovie/common/process/runner.py
from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ffmovie.common.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ToolOutput:
    """
    Combined stdout/stderr of one tool run. `returncode` is informational only;
    `error` holds the OS error text when the tool could not be started at all.
    """
    text: str
    returncode: Optional[int] = None
    error: Optional[str] = None


def quote_cmd(cmd: Sequence[str]) -> str:
    return " ".join(shlex.quote(str(p)) for p in cmd)


def run_combined(cmd: Sequence[str]) -> ToolOutput:
    """
    Run `cmd` with stderr folded into stdout (the `2>&1` form) and return the text
    re-joined line by line. A binary that cannot be spawned yields empty output,
    so callers detect it the same way as a wrong binary: by its missing banner.
    """
    args: List[str] = [str(p) for p in cmd]
    logger.debug("tool cmd: %s", quote_cmd(args))
    try:
        proc = subprocess.run(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as e:
        logger.warning("failed to execute %s: %s", args[0], e)
        return ToolOutput(text="", returncode=None, error=str(e))

    lines = (proc.stdout or "").splitlines()
    return ToolOutput(text="\n".join(lines), returncode=proc.returncode)
