import pytest
from pathlib import Path
from ffmovie.common.path.safe import resolve_root, safe_join


def test_resolve_root(tmp_path):
    p = resolve_root(tmp_path)
    assert isinstance(p, Path)
    assert p.exists()


def test_safe_join_inside(tmp_path):
    out = safe_join(tmp_path, Path("clips/2024/intro.mp4"))
    assert out.parent == tmp_path.resolve() / "clips" / "2024"
    assert str(out).startswith(str(tmp_path.resolve()))


def test_safe_join_escapes_rejected(tmp_path):
    with pytest.raises(ValueError):
        safe_join(tmp_path, "../outside.mp4")


def test_safe_join_absolute_rejected(tmp_path):
    with pytest.raises(ValueError):
        safe_join(tmp_path, "/etc/passwd")
