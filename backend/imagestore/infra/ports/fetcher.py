from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import AbstractContextManager
from dataclasses import dataclass


@dataclass
class FetchResponse:
    status_code: int
    reason: str
    content_type: str | None = None
    chunks: Iterator[bytes] | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class ImageFetcherPort(ABC):
    @abstractmethod
    def open(self, url: str) -> AbstractContextManager[FetchResponse]:
        """Issue a GET and expose the response body as a chunk stream."""
