"""Tests for the filesystem image store."""

import base64

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.infrastructure.storage.local_image_store import LocalImageStore, decode_data_uri

PNG_BYTES = b"\x89PNG\r\n\x1a\n"


class TestLocalImageStore:

    def test_upload_writes_decoded_file(self, tmp_path):
        data_uri = "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode()

        url = LocalImageStore(tmp_path / "images").upload("item1", data_uri)

        stored = tmp_path / "images" / "item1.png"
        assert stored.read_bytes() == PNG_BYTES
        assert url == stored.resolve().as_uri()

    def test_plain_data_uri(self):
        assert decode_data_uri("data:text/plain,hello%20world") == ("text/plain", b"hello world")

    def test_remote_url_rejected(self, tmp_path):
        with pytest.raises(ValidationError, match="Not an inline data URI"):
            LocalImageStore(tmp_path).upload("item1", "https://cdn.example/a.png")

    def test_corrupt_base64_rejected(self, tmp_path):
        with pytest.raises(ValidationError, match="Corrupt base64"):
            LocalImageStore(tmp_path).upload("item1", "data:image/png;base64,@@@")
