import io
from unittest.mock import MagicMock

import httpx
import pytest
from PIL import Image

from dairy_site.services.image_processor import optimize_image
from dairy_site.services.storage import StorageClient, StorageError, build_storage_path, validate_file

SVG = b'<svg xmlns="http://www.w3.org/2000/svg"/>'


def png(width, height):
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), "white").save(buffer, format="PNG")
    return buffer.getvalue()


def make_storage(upload_error=None):
    bucket = MagicMock()
    bucket.get_public_url.side_effect = lambda path: f"https://cdn.example/site-assets/{path}"
    if upload_error is not None:
        bucket.upload.side_effect = upload_error
    backend = MagicMock()
    backend.storage.from_.return_value = bucket
    return StorageClient(backend, bucket="site-assets"), bucket


def test_validate_file():
    assert validate_file(b"", "a.png", "image/png") == (False, "File is empty")
    assert validate_file(b"x" * 11, "a.png", "image/png", max_size=10)[0] is False
    assert validate_file(b"x", "a.pdf", "application/pdf")[0] is False
    assert validate_file(b"x", "a.png") == (True, "")


def test_build_storage_path():
    path = build_storage_path("products", "Milk Bottle.JPEG", "image/jpeg")
    assert path.startswith("products/")
    assert path.endswith(".jpg")
    assert "Milk" not in path


def test_optimize_image_downscales_wide_images():
    resized = optimize_image(png(400, 200), "image/png", max_width=100)
    assert Image.open(io.BytesIO(resized)).size == (100, 50)


def test_optimize_image_keeps_narrow_images():
    data = png(50, 50)
    assert optimize_image(data, "image/png", max_width=100) == data


def test_optimize_image_rejects_garbage():
    with pytest.raises(ValueError):
        optimize_image(b"not an image", "image/png")


@pytest.mark.asyncio
async def test_upload_returns_public_url():
    storage, bucket = make_storage()

    url = await storage.upload_image(SVG, "logo.svg", folder="settings", mime_type="image/svg+xml")

    assert url.startswith("https://cdn.example/site-assets/settings/")
    assert url.endswith(".svg")
    assert bucket.upload.call_args.kwargs["file"] == SVG


@pytest.mark.asyncio
async def test_upload_rejects_invalid_file_before_network():
    storage, bucket = make_storage()
    with pytest.raises(StorageError):
        await storage.upload_image(b"", "empty.png", folder="products", mime_type="image/png")
    bucket.upload.assert_not_called()


@pytest.mark.asyncio
async def test_upload_connection_failure_becomes_storage_error():
    storage, _ = make_storage(upload_error=httpx.ConnectError("connection refused"))
    with pytest.raises(StorageError) as excinfo:
        await storage.upload_image(SVG, "logo.svg", folder="settings", mime_type="image/svg+xml")
    assert "connection refused" in str(excinfo.value)
