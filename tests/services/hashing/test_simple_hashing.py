import hashlib

from ffmovie.services.hashing.simple_hashing import SimpleHashing


def test_sha256_bytes_matches_hashlib():
    data = b"frame" * 1000
    assert SimpleHashing().sha256_bytes(data, chunk_size=7) == hashlib.sha256(data).hexdigest()


def test_sha256_bytes_empty():
    assert SimpleHashing().sha256_bytes(b"") == hashlib.sha256(b"").hexdigest()
