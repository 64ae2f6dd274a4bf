from __future__ import annotations
from typing import Protocol

class HashingPort(Protocol):
    def sha256_bytes(self, data: bytes) -> str: ...
