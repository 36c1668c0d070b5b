"""Best-effort background upload of inline cart images.

Checkout never waits for these uploads. A failed upload is logged as a
warning and does not affect the checkout that triggered it; the shopper
gets a fast checkout and the image may arrive later or not at all.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from functools import partial

from storefront.domain.gateway.image_uploader import ImageUploader
from storefront.domain.model.cart import CartLineItem

logger = logging.getLogger(__name__)


class BackgroundImageUploads:

    def __init__(self, uploader: ImageUploader, executor: Executor | None = None) -> None:
        self._uploader = uploader
        self._executor = executor or ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="image-upload"
        )

    def schedule(self, items: Iterable[CartLineItem]) -> list[Future]:
        """Start uploading every inline image; return without waiting."""
        futures: list[Future] = []
        for item in items:
            if not item.has_inline_image:
                continue
            future = self._executor.submit(self._uploader.upload, item.id, item.image_reference)
            future.add_done_callback(partial(self._report, item))
            futures.append(future)
        return futures

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    @staticmethod
    def _report(item: CartLineItem, future: Future) -> None:
        exc = future.exception()
        if exc is not None:
            logger.warning(
                "Image upload for cart item %s (%s) failed: %s",
                item.id,
                item.product_name,
                exc,
            )
            return
        logger.info("Image for cart item %s stored at %s", item.id, future.result())
