from pathlib import Path

from ffmovie.common.settings import Settings, get_settings


def test_settings_temp_root_created(tmp_path, monkeypatch):
    target = tmp_path / "scratch"
    monkeypatch.setenv("TEMP_ROOT", str(target))
    get_settings.cache_clear()

    cfg = get_settings()
    assert cfg.temp_root == target
    assert target.exists()


def test_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("FFMPEG_BIN", "/opt/ffmpeg/bin/ffmpeg")
    monkeypatch.setenv("PERSISTENT_OUTPUT", "yes")
    monkeypatch.setenv("FRAMES__IMAGE_FORMAT", "png")
    get_settings.cache_clear()

    cfg = get_settings()
    assert cfg.ffmpeg_bin == "/opt/ffmpeg/bin/ffmpeg"
    assert cfg.persistent_output is True
    assert cfg.frames.image_format == "png"


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("FFMPEG_BIN", raising=False)
    monkeypatch.delenv("FFPROBE_BIN", raising=False)
    s = Settings(_env_file=None)
    assert s.ffmpeg_bin == "/usr/local/bin/ffmpeg"
    assert s.ffprobe_bin == "ffprobe"
    assert s.persistent_output is False
    assert s.frames.name_prefix == "frame"
    assert s.api.prefix == "/api"
    assert isinstance(s.media_root, Path)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
