from __future__ import annotations

import hashlib

from ffmovie.domain.ports.hashing import HashingPort


class SimpleHashing(HashingPort):
    """
    SHA-256 of frame bytes, fed in fixed chunks so large stills do not
    need a second copy in memory.
    """

    def sha256_bytes(self, data: bytes, chunk_size: int = 1024 * 1024) -> str:
        h = hashlib.sha256()
        view = memoryview(data)
        for start in range(0, len(view), chunk_size):
            h.update(view[start:start + chunk_size])
        return h.hexdigest()
