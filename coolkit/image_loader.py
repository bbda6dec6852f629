"""
Batched asynchronous image preloading.

`load_images_async` starts one fetch per source at once and reports back
through callbacks: ``on_progress(count)`` after each successful load except
the last, then ``on_complete(images)`` once every image is ready. The image
list handed to ``on_complete`` is built when the fetches are issued, so it
follows the original request order whatever order the loads finish in.

Failed loads do not advance the counter by default, so a single failure
leaves the batch incomplete and neither callback fires for it. The
``timeout``, ``on_error`` and ``count_failures`` options change that
behaviour explicitly.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Awaitable, Callable, List, Optional, Sequence, Set
from urllib.parse import unquote, urlparse

import httpx

from config.toolkit_config import CONFIG

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Awaitable[bytes]]
CompleteCallback = Callable[[List["LoadedImage"]], Any]
ProgressCallback = Callable[[int], Any]
ErrorCallback = Callable[[int, str, BaseException], Any]


class ImageLoadError(RuntimeError):
    """Raised by the default fetcher when an image cannot be retrieved."""


class ImageStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    ERROR = "error"


@dataclass
class LoadedImage:
    """Handle for one requested image; filled in when its fetch settles."""

    src: str
    status: ImageStatus = ImageStatus.PENDING
    data: Optional[bytes] = None
    error: Optional[BaseException] = None

    @property
    def ready(self) -> bool:
        return self.status is ImageStatus.READY

    def mark_ready(self, data: bytes) -> None:
        self.status = ImageStatus.READY
        self.data = data
        self.error = None

    def mark_failed(self, error: BaseException) -> None:
        self.status = ImageStatus.ERROR
        self.error = error


@dataclass
class ImageBatch:
    """State of one `load_images_async` call."""

    paths: List[str]
    images: List[LoadedImage] = field(default_factory=list)
    loaded_count: int = 0
    failed_indexes: List[int] = field(default_factory=list)
    complete: bool = False

    @property
    def total(self) -> int:
        return len(self.paths)


class HttpImageFetcher:
    """
    Default fetcher: GET over HTTP(S) with httpx, plain reads for local files.

    Sources without an ``http``/``https`` scheme are treated as filesystem
    paths (``file://`` URLs included) and read in a worker thread. Used as an
    async context manager the fetcher keeps one ``httpx.AsyncClient`` open,
    so a batch shares its connection pool; pass *client* to supply your own
    (it is then left open). Outside a context each request opens its own
    client.
    """

    def __init__(
        self,
        timeout: float = CONFIG.HTTP_TIMEOUT_S,
        follow_redirects: bool = CONFIG.HTTP_FOLLOW_REDIRECTS,
        headers: Optional[dict] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.headers = dict(headers or {})
        self._client = client
        self._owns_client = False

    async def __aenter__(self) -> "HttpImageFetcher":
        if self._client is None:
            self._client = self._new_client()
            self._owns_client = True
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            self._owns_client = False
        return False

    async def __call__(self, src: str) -> bytes:
        parsed = urlparse(src)
        if parsed.scheme in ("http", "https"):
            return await self._fetch_http(src)
        path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(src)
        return await asyncio.to_thread(path.read_bytes)

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, follow_redirects=self.follow_redirects)

    async def _fetch_http(self, url: str) -> bytes:
        if self._client is not None:
            resp = await self._client.get(url, headers=self.headers)
        else:
            async with self._new_client() as client:
                resp = await client.get(url, headers=self.headers)
        if not 200 <= resp.status_code < 300:
            raise ImageLoadError(f"HTTP {resp.status_code} for {url}")
        return resp.content


async def load_images_async(
    paths: Sequence[str],
    on_complete: CompleteCallback,
    on_progress: Optional[ProgressCallback] = None,
    *,
    fetcher: Optional[Fetcher] = None,
    timeout: Optional[float] = CONFIG.IMAGE_LOAD_TIMEOUT_S,
    on_error: Optional[ErrorCallback] = None,
    count_failures: bool = CONFIG.COUNT_FAILED_LOADS,
) -> ImageBatch:
    """
    Load every image in *paths* concurrently and report through callbacks.

    Parameters
    ----------
    paths:
        Image sources, in the order ``on_complete`` should receive them.
    on_complete:
        Called once with the list of `LoadedImage` handles when every load
        has been counted. An empty *paths* calls it with ``[]`` straight away.
    on_progress:
        Optional; called with the running count after each counted load
        except the final one.
    fetcher:
        Async callable returning the image bytes for a source. Defaults to
        an `HttpImageFetcher` whose client is shared by the whole batch.
    timeout:
        Per-image limit in seconds. None lets a stalled fetch stall the
        whole batch.
    on_error:
        Optional failure channel, called with ``(index, src, exc)``.
    count_failures:
        When True a failed load advances the counter like a successful one,
        so the batch always completes.
    """
    batch = ImageBatch(paths=list(paths))
    batch.images = [LoadedImage(src=src) for src in batch.paths]

    if not batch.paths:
        batch.complete = True
        on_complete([])
        return batch

    def single_image_counted() -> None:
        batch.loaded_count += 1
        if batch.loaded_count >= batch.total:
            batch.complete = True
            on_complete(list(batch.images))
        elif on_progress is not None:
            on_progress(batch.loaded_count)

    async def load_one(fetch: Fetcher, index: int, image: LoadedImage) -> None:
        logger.debug("Fetching image %d/%d: %s", index + 1, batch.total, image.src)
        try:
            if timeout is None:
                data = await fetch(image.src)
            else:
                data = await asyncio.wait_for(fetch(image.src), timeout)
        except Exception as exc:
            image.mark_failed(exc)
            batch.failed_indexes.append(index)
            logger.warning("Failed to load image %s: %s", image.src, exc)
            if on_error is not None:
                on_error(index, image.src, exc)
            if count_failures:
                single_image_counted()
            return
        image.mark_ready(data)
        single_image_counted()

    async def load_all(fetch: Fetcher) -> None:
        await asyncio.gather(*(load_one(fetch, index, image) for index, image in enumerate(batch.images)))

    if fetcher is not None:
        await load_all(fetcher)
    else:
        async with HttpImageFetcher() as default_fetcher:
            await load_all(default_fetcher)

    if not batch.complete:
        logger.warning(
            "Image batch incomplete: %d of %d loaded, %d failed",
            batch.loaded_count,
            batch.total,
            len(batch.failed_indexes),
        )
    return batch


_pending_batches: Set["asyncio.Task[ImageBatch]"] = set()


def _report_batch_failure(task: "asyncio.Task[ImageBatch]") -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Image batch task failed: %s", exc, exc_info=exc)


def load_images(
    paths: Sequence[str],
    on_complete: CompleteCallback,
    on_progress: Optional[ProgressCallback] = None,
    **options: Any,
) -> "asyncio.Task[ImageBatch]":
    """
    Fire-and-forget form of `load_images_async`.

    Must be called from code running inside an event loop. The batch is
    scheduled as a task and a reference is held until it finishes; the task
    is returned for callers that want to await or cancel it. Exceptions
    raised by the callbacks are logged when the task finishes.
    """
    loop = asyncio.get_running_loop()
    task = loop.create_task(load_images_async(paths, on_complete, on_progress, **options))
    _pending_batches.add(task)
    task.add_done_callback(_pending_batches.discard)
    task.add_done_callback(_report_batch_failure)
    return task
