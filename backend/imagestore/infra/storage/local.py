from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from imagestore.infra.ports.storage import ImageDirectoryPort

logger = logging.getLogger(__name__)


class LocalImageDirectory(ImageDirectoryPort):
    def __init__(self, base_dir: Path, *, url_prefix: str = "/resource/image/audio"):
        self.base_dir = Path(base_dir)
        self.url_prefix = "/" + url_prefix.strip("/")

    def _path(self, filename: str) -> Path:
        return self.base_dir / filename

    def ensure_exists(self) -> bool:
        if self.base_dir.exists():
            return False
        logger.info("Creating images directory %s", self.base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)
        return True

    def write_bytes(self, filename: str, data: bytes) -> None:
        self._path(filename).write_bytes(data)

    def write_chunks(self, filename: str, chunks: Iterable[bytes]) -> None:
        with self._path(filename).open("wb") as fh:
            for chunk in chunks:
                fh.write(chunk)

    def copy_from(self, source: Path, filename: str) -> None:
        shutil.copyfile(source, self._path(filename))

    def remove(self, filename: str) -> None:
        self._path(filename).unlink(missing_ok=True)

    def purge(self) -> int:
        if not self.base_dir.exists():
            return 0

        deleted = 0
        for entry in sorted(self.base_dir.iterdir()):
            if entry.is_dir() and not entry.is_symlink():
                logger.warning("Skipping non-file entry in images directory: %s", entry.name)
                continue
            entry.unlink()
            deleted += 1
        return deleted

    def build_url(self, filename: str) -> str:
        return f"{self.url_prefix}/{filename}"
