from __future__ import annotations

import logging
import re
from pathlib import Path

import httpx

from imagestore.domain.models import FailureKind, ImageWriteError, SaveResult
from imagestore.domain.sources import (
    FILE_SCHEME,
    DataUri,
    ImageSource,
    RawBinaryPayload,
    RemoteUrl,
    classify_image_data,
)
from imagestore.infra.ports.fetcher import ImageFetcherPort
from imagestore.infra.ports.storage import ImageDirectoryPort
from imagestore.utils.encoding import binary_string_to_bytes, decode_base64_payload
from imagestore.utils.extensions import DEFAULT_EXTENSION, extension_for_content_type, get_file_extension

logger = logging.getLogger(__name__)

_DATA_URI_PATTERN = re.compile(r"^data:image/([a-zA-Z+]+);base64,")


def _validate_file_name(file_name: str) -> None:
    if not file_name or not file_name.strip():
        raise ValueError("fileName must be a non-empty string")
    if "/" in file_name or "\\" in file_name or file_name in {".", ".."}:
        raise ValueError(f"fileName must not contain path separators: {file_name!r}")


def _failure_kind(exc: BaseException) -> FailureKind:
    if isinstance(exc, (httpx.HTTPError, httpx.InvalidURL)):
        return FailureKind.TRANSPORT
    return FailureKind.IO


class ImageStoreService:
    """Persist images into one flat directory and hand back their resource path.

    ``save`` always returns a ``SaveResult``. ``save_image`` keeps the older
    contract: it returns the path or ``None``, except that write failures in
    the data URI and binary branches are raised as ``ImageWriteError``.
    """

    def __init__(
        self,
        *,
        images: ImageDirectoryPort,
        fetcher: ImageFetcherPort,
        infer_extension: bool = False,
    ):
        self.images = images
        self.fetcher = fetcher
        self.infer_extension = infer_extension

    def save_image(self, image_data: str, file_name: str) -> str | None:
        source = classify_image_data(image_data)
        result = self.save(source, file_name)
        if result.ok:
            return result.path
        if result.failure is FailureKind.IO and isinstance(source, (DataUri, RawBinaryPayload)):
            raise ImageWriteError(result.reason) from result.error
        return None

    def save(self, source: ImageSource, file_name: str) -> SaveResult:
        _validate_file_name(file_name)
        if isinstance(source, RemoteUrl):
            logger.info("Processing image URL")
            return self.download_image(source.url, file_name)
        if isinstance(source, DataUri):
            logger.info("Processing base64 image data")
            return self.save_base64_image(source.uri, file_name)
        logger.info("Processing binary image data")
        return self.save_binary_image(source.data, file_name)

    def download_image(self, url: str, file_name: str) -> SaveResult:
        try:
            self.images.ensure_exists()
            if url.startswith(FILE_SCHEME):
                return self.handle_local_file(url, file_name)
            return self._fetch_remote(url, file_name)
        except Exception as exc:
            logger.error("Failed to download image: %s", exc)
            return SaveResult.failed(_failure_kind(exc), str(exc), exc)

    def _fetch_remote(self, url: str, file_name: str) -> SaveResult:
        with self.fetcher.open(url) as response:
            if not response.ok:
                reason = f"{response.status_code} {response.reason}".strip()
                logger.error("Failed to fetch image: %s", reason)
                return SaveResult.failed(FailureKind.TRANSPORT, f"Failed to fetch image: {reason}")
            if response.chunks is None:
                logger.error("No response body received")
                return SaveResult.failed(FailureKind.TRANSPORT, "No response body received")

            extension = DEFAULT_EXTENSION
            if self.infer_extension:
                extension = get_file_extension(url, response.content_type)
            filename = f"{file_name}.{extension}"
            try:
                self.images.write_chunks(filename, response.chunks)
            except Exception:
                self.images.remove(filename)
                raise

        logger.info("Successfully downloaded image: %s", filename)
        return SaveResult.saved(self.images.build_url(filename))

    def handle_local_file(self, file_url: str, file_name: str) -> SaveResult:
        local_path = Path(file_url[len(FILE_SCHEME):] if file_url.startswith(FILE_SCHEME) else file_url)
        filename = f"{file_name}.{DEFAULT_EXTENSION}"
        try:
            self.images.ensure_exists()
            if not local_path.exists():
                logger.error("Local file does not exist: %s", local_path)
                return SaveResult.failed(FailureKind.NOT_FOUND, f"Local file does not exist: {local_path}")
            self.images.copy_from(local_path, filename)
        except OSError as exc:
            logger.error("Failed to handle local file: %s", exc)
            return SaveResult.failed(FailureKind.IO, str(exc), exc)

        logger.info("Successfully copied local file: %s", filename)
        return SaveResult.saved(self.images.build_url(filename))

    def save_base64_image(self, data_uri: str, file_name: str) -> SaveResult:
        match = _DATA_URI_PATTERN.match(data_uri)
        if match is None:
            logger.error("Invalid base64 image format")
            return SaveResult.failed(FailureKind.INVALID_INPUT, "Invalid base64 image format")

        extension = DEFAULT_EXTENSION
        if self.infer_extension:
            extension = extension_for_content_type(f"image/{match.group(1)}") or DEFAULT_EXTENSION
        try:
            payload = decode_base64_payload(data_uri[match.end():])
        except ValueError as exc:
            logger.error("Invalid base64 payload: %s", exc)
            return SaveResult.failed(FailureKind.INVALID_INPUT, f"Invalid base64 payload: {exc}", exc)

        filename = f"{file_name}.{extension}"
        try:
            self.images.ensure_exists()
            self.images.write_bytes(filename, payload)
        except OSError as exc:
            logger.error("Failed to save base64 image: %s", exc)
            return SaveResult.failed(FailureKind.IO, f"Failed to save base64 image: {exc}", exc)

        logger.info("Successfully saved base64 image: %s", filename)
        return SaveResult.saved(self.images.build_url(filename))

    def save_binary_image(self, binary_data: str, file_name: str) -> SaveResult:
        filename = f"{file_name}.{DEFAULT_EXTENSION}"
        try:
            self.images.ensure_exists()
            self.images.write_bytes(filename, binary_string_to_bytes(binary_data))
        except OSError as exc:
            logger.error("Failed to save binary image: %s", exc)
            return SaveResult.failed(FailureKind.IO, f"Failed to save binary image: {exc}", exc)

        logger.info("Successfully saved binary image: %s", filename)
        return SaveResult.saved(self.images.build_url(filename))

    def delete_images(self) -> int:
        deleted = self.images.purge()
        logger.info("Deleted %d stored images", deleted)
        return deleted
