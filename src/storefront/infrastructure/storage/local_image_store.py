"""Filesystem implementation of the ImageUploader port.

Decodes inline ``data:`` URIs and writes them under a directory, returning
a ``file://`` URL for the stored image.
"""

from __future__ import annotations

import base64
import binascii
import mimetypes
from pathlib import Path
from urllib.parse import unquote_to_bytes

from storefront.domain.exceptions import ValidationError
from storefront.domain.gateway.image_uploader import ImageUploader
from storefront.domain.model.cart import is_inline_image


def decode_data_uri(data_uri: str) -> tuple[str, bytes]:
    """Return (mime type, payload) for a ``data:[<type>][;base64],<data>`` URI."""
    if not is_inline_image(data_uri) or "," not in data_uri:
        raise ValidationError("Not an inline data URI")
    header, payload = data_uri[len("data:"):].split(",", 1)
    parts = header.split(";")
    mime_type = parts[0] or "application/octet-stream"
    if "base64" in parts[1:]:
        try:
            return mime_type, base64.b64decode(payload, validate=True)
        except binascii.Error as exc:
            raise ValidationError(f"Corrupt base64 image data: {exc}") from exc
    return mime_type, unquote_to_bytes(payload)


class LocalImageStore(ImageUploader):

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    def upload(self, name: str, data_uri: str) -> str:
        mime_type, payload = decode_data_uri(data_uri)
        extension = mimetypes.guess_extension(mime_type) or ".bin"
        self._directory.mkdir(parents=True, exist_ok=True)
        path = self._directory / f"{name}{extension}"
        path.write_bytes(payload)
        return path.resolve().as_uri()
