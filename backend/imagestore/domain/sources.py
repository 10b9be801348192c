"""Input variants accepted by the image store.

A caller hands over one string that may hold a URL, a data URI or a raw
binary payload. ``classify_image_data`` turns it into one of the variants
below so the rest of the code never sniffs prefixes again.
"""

from __future__ import annotations

from dataclasses import dataclass

REMOTE_PREFIXES = ("http://", "https://", "file://")
FILE_SCHEME = "file://"
DATA_URI_PREFIX = "data:image"


@dataclass(frozen=True)
class RemoteUrl:
    url: str

    @property
    def is_local_file(self) -> bool:
        return self.url.startswith(FILE_SCHEME)

    @property
    def local_path(self) -> str | None:
        if not self.is_local_file:
            return None
        return self.url[len(FILE_SCHEME):]


@dataclass(frozen=True)
class DataUri:
    uri: str


@dataclass(frozen=True, repr=False)
class RawBinaryPayload:
    data: str

    def __repr__(self) -> str:
        return f"RawBinaryPayload(<{len(self.data)} chars>)"


ImageSource = RemoteUrl | DataUri | RawBinaryPayload


def classify_image_data(raw: str) -> ImageSource:
    if raw.startswith(REMOTE_PREFIXES):
        return RemoteUrl(raw)
    if raw.startswith(DATA_URI_PREFIX):
        return DataUri(raw)
    return RawBinaryPayload(raw)
