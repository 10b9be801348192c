from pathlib import Path

import pytest

from imagestore.core.config import BACKEND_ROOT, get_settings


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch, fresh_settings):
    for name in (
        "IMAGESTORE_IMAGES_DIR",
        "IMAGESTORE_RESOURCE_PREFIX",
        "IMAGESTORE_FETCH_TIMEOUT_SECONDS",
        "IMAGESTORE_INFER_EXTENSION",
        "IMAGESTORE_CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = fresh_settings()

    assert settings.images_dir == BACKEND_ROOT / "images"
    assert settings.resource_prefix == "/resource/image/audio"
    assert settings.fetch_timeout_seconds == 30.0
    assert settings.infer_extension is False
    assert settings.cors_origins == ["http://localhost:3000"]


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, fresh_settings):
    monkeypatch.setenv("IMAGESTORE_IMAGES_DIR", str(tmp_path / "art"))
    monkeypatch.setenv("IMAGESTORE_RESOURCE_PREFIX", "media/images/")
    monkeypatch.setenv("IMAGESTORE_FETCH_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("IMAGESTORE_INFER_EXTENSION", "yes")
    monkeypatch.setenv("IMAGESTORE_CORS_ORIGINS", "http://a.local, ,http://b.local")

    settings = fresh_settings()

    assert settings.images_dir == tmp_path / "art"
    assert settings.resource_prefix == "/media/images"
    assert settings.fetch_timeout_seconds == 2.5
    assert settings.infer_extension is True
    assert settings.cors_origins == ["http://a.local", "http://b.local"]


def test_invalid_timeout_falls_back(monkeypatch: pytest.MonkeyPatch, fresh_settings):
    monkeypatch.setenv("IMAGESTORE_FETCH_TIMEOUT_SECONDS", "soon")
    assert fresh_settings().fetch_timeout_seconds == 30.0

    get_settings.cache_clear()
    monkeypatch.setenv("IMAGESTORE_FETCH_TIMEOUT_SECONDS", "-4")
    assert fresh_settings().fetch_timeout_seconds == 30.0
