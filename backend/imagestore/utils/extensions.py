"""File extension helpers for stored images."""

from __future__ import annotations

DEFAULT_EXTENSION = "png"
FALLBACK_EXTENSION = "jpg"

_CONTENT_TYPE_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
    "image/svg+xml": "svg",
    "image/bmp": "bmp",
    "image/tiff": "tiff",
}
_URL_EXTENSIONS = {"jpg", "jpeg", "png", "gif", "webp", "svg", "bmp", "tiff"}


def extension_for_content_type(content_type: str | None) -> str | None:
    if not content_type:
        return None
    # "image/png; charset=binary" -> "image/png"
    media_type = content_type.split(";", 1)[0].strip().lower()
    return _CONTENT_TYPE_EXTENSIONS.get(media_type)


def get_file_extension(url: str, content_type: str | None) -> str:
    """Pick an extension from the Content-Type header, then the URL, else ``jpg``."""
    from_header = extension_for_content_type(content_type)
    if from_header:
        return from_header

    url_extension = url.rsplit(".", 1)[-1].split("?", 1)[0].lower()
    if url_extension in _URL_EXTENSIONS:
        return "jpg" if url_extension == "jpeg" else url_extension

    return FALLBACK_EXTENSION
