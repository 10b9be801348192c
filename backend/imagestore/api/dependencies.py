from __future__ import annotations

from functools import lru_cache

from imagestore.application.images import ImageStoreService
from imagestore.core.config import get_settings
from imagestore.infra.http.fetcher import HttpxImageFetcher
from imagestore.infra.ports.fetcher import ImageFetcherPort
from imagestore.infra.ports.storage import ImageDirectoryPort
from imagestore.infra.storage.local import LocalImageDirectory


@lru_cache(maxsize=1)
def get_image_directory() -> ImageDirectoryPort:
    settings = get_settings()
    return LocalImageDirectory(settings.images_dir, url_prefix=settings.resource_prefix)


@lru_cache(maxsize=1)
def get_fetcher() -> ImageFetcherPort:
    return HttpxImageFetcher(timeout_seconds=get_settings().fetch_timeout_seconds)


def get_image_store_service() -> ImageStoreService:
    return ImageStoreService(
        images=get_image_directory(),
        fetcher=get_fetcher(),
        infer_extension=get_settings().infer_extension,
    )


async def provide_image_store() -> ImageStoreService:
    return get_image_store_service()
