from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FailureKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    TRANSPORT = "transport"
    IO = "io"


class ImageStoreError(Exception):
    """Base error raised by the image store."""


class ImageWriteError(ImageStoreError):
    """Writing a decoded data URI or binary payload to disk failed."""


@dataclass(frozen=True)
class SaveResult:
    path: str | None = None
    failure: FailureKind | None = None
    reason: str | None = None
    error: BaseException | None = field(default=None, compare=False, repr=False)

    @property
    def ok(self) -> bool:
        return self.path is not None

    @classmethod
    def saved(cls, path: str) -> "SaveResult":
        return cls(path=path)

    @classmethod
    def failed(
        cls,
        failure: FailureKind,
        reason: str,
        error: BaseException | None = None,
    ) -> "SaveResult":
        return cls(failure=failure, reason=reason, error=error)
