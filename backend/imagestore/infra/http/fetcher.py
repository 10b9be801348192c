from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import httpx

from imagestore.infra.ports.fetcher import FetchResponse, ImageFetcherPort

# 2xx statuses that never carry a body
_NO_BODY_STATUSES = {204, 205}


class HttpxImageFetcher(ImageFetcherPort):
    """Single-attempt GET with a bounded timeout. No retries."""

    def __init__(
        self,
        *,
        timeout_seconds: float = 30,
        transport: httpx.BaseTransport | None = None,
    ):
        self.timeout_seconds = max(1.0, float(timeout_seconds))
        self._transport = transport

    @contextmanager
    def open(self, url: str) -> Iterator[FetchResponse]:
        with httpx.Client(
            timeout=self.timeout_seconds,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            with client.stream("GET", url) as response:
                has_body = response.status_code not in _NO_BODY_STATUSES
                yield FetchResponse(
                    status_code=response.status_code,
                    reason=response.reason_phrase,
                    content_type=response.headers.get("content-type"),
                    chunks=response.iter_bytes() if has_body else None,
                )
