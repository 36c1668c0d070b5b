"""Image storage port.

Shoppers may attach a photo that is still an inline ``data:`` URI when
they check out. Uploading it to durable storage is best effort and runs
beside checkout, never in front of it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ImageUploader(ABC):

    @abstractmethod
    def upload(self, name: str, data_uri: str) -> str:
        """Store an inline image and return its durable URL."""
