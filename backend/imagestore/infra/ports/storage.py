from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path


class ImageDirectoryPort(ABC):
    @abstractmethod
    def ensure_exists(self) -> bool:
        """Create the directory if missing. Return True when it was created."""

    @abstractmethod
    def write_bytes(self, filename: str, data: bytes) -> None:
        """Write (or overwrite) one file with the given bytes."""

    @abstractmethod
    def write_chunks(self, filename: str, chunks: Iterable[bytes]) -> None:
        """Stream chunks into one file, overwriting any previous content."""

    @abstractmethod
    def copy_from(self, source: Path, filename: str) -> None:
        """Copy an existing local file verbatim."""

    @abstractmethod
    def remove(self, filename: str) -> None:
        """Remove one file if it exists."""

    @abstractmethod
    def purge(self) -> int:
        """Delete every file in the directory and return how many were removed."""

    @abstractmethod
    def build_url(self, filename: str) -> str:
        """Resolve the public resource path for a stored file."""
