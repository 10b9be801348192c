from pathlib import Path

from imagestore.infra.storage.local import LocalImageDirectory


def test_directory_is_created_lazily(tmp_path: Path):
    images_dir = tmp_path / "nested" / "images"
    storage = LocalImageDirectory(images_dir)

    assert not images_dir.exists()
    assert storage.ensure_exists() is True
    assert images_dir.is_dir()
    assert storage.ensure_exists() is False


def test_write_copy_and_url(tmp_path: Path):
    storage = LocalImageDirectory(tmp_path, url_prefix="resource/image/audio/")
    source = tmp_path / "source.bin"
    source.write_bytes(b"original")

    storage.write_bytes("a.png", b"first")
    storage.write_chunks("b.png", iter([b"chu", b"nks"]))
    storage.copy_from(source, "c.png")

    assert (tmp_path / "a.png").read_bytes() == b"first"
    assert (tmp_path / "b.png").read_bytes() == b"chunks"
    assert (tmp_path / "c.png").read_bytes() == b"original"
    assert storage.build_url("a.png") == "/resource/image/audio/a.png"


def test_remove_ignores_missing(tmp_path: Path):
    storage = LocalImageDirectory(tmp_path)
    storage.write_bytes("a.png", b"x")

    storage.remove("a.png")
    storage.remove("a.png")

    assert not (tmp_path / "a.png").exists()


def test_purge_keeps_directory_and_skips_subdirectories(tmp_path: Path):
    images_dir = tmp_path / "images"
    storage = LocalImageDirectory(images_dir)
    storage.ensure_exists()
    for name in ("one.png", "two.png", "three.png"):
        storage.write_bytes(name, b"x")
    (images_dir / "nested").mkdir()

    assert storage.purge() == 3
    assert images_dir.is_dir()
    assert [p.name for p in images_dir.iterdir()] == ["nested"]


def test_purge_missing_directory_is_noop(tmp_path: Path):
    storage = LocalImageDirectory(tmp_path / "never-created")

    assert storage.purge() == 0
    assert not (tmp_path / "never-created").exists()
