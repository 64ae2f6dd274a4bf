# ffmovie/common/naming/slugger.py
from __future__ import annotations

import secrets
import string
from typing import Iterable

DEFAULT_ALPHABET = string.ascii_lowercase + string.digits


def random_slug(length: int = 13, alphabet: Iterable[str] = DEFAULT_ALPHABET) -> str:
    """Generate a short, filesystem-friendly slug (default: 13 chars of [a-z0-9])."""
    pool = tuple(alphabet)
    return "".join(secrets.choice(pool) for _ in range(length))


def unique_filename(prefix: str, ext: str, length: int = 13) -> str:
    """
    Unique-enough file name for scratch files, e.g. "frame4kq0z9x1b2c3d.jpg".
    The extension may be given with or without the leading dot.
    """
    ext = (ext or "").lstrip(".")
    name = f"{prefix}{random_slug(length)}"
    return f"{name}.{ext}" if ext else name
