# ffmovie/common/path/safe.py
from __future__ import annotations

import os
from pathlib import Path


def resolve_root(root: Path | str) -> Path:
    """Resolve a media root directory."""
    return Path(root).expanduser().resolve()


def safe_join(root: Path | str, rel: Path | str) -> Path:
    """
    Join 'root' and a relative movie path safely, ensuring the result stays inside 'root'.
    Raises ValueError if traversal escapes the root.
    """
    r = resolve_root(root)
    p = (r / str(rel)).resolve()
    try:
        p.relative_to(r)
    except ValueError as exc:
        if not str(p).startswith(str(r) + os.sep):
            raise ValueError(f"path {p} escapes root {r}") from exc
    return p
