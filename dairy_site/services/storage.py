"""
Supabase Storage service for image uploads.

Product, recipe, hero, banner, discount and logo images are uploaded to one
public bucket, one folder per entity type, and referenced by public URL.
"""

import logging
import time
import uuid
from pathlib import Path
from typing import Optional, Tuple

import httpx
from starlette.concurrency import run_in_threadpool
from storage3.utils import StorageException
from supabase import Client

from dairy_site.config import get_settings
from dairy_site.services.image_processor import optimize_image

logger = logging.getLogger(__name__)

# Allowed MIME types for images
ALLOWED_MIME_TYPES = [
    "image/jpeg",
    "image/png",
    "image/webp",
    "image/avif",
    "image/gif",
    "image/svg+xml",
]

# MIME type to extension mapping
MIME_TO_EXT = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
    "image/avif": ".avif",
    "image/gif": ".gif",
    "image/svg+xml": ".svg",
}

EXT_TO_MIME = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
    ".avif": "image/avif",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
}

# Extensions that make a URL "look like" an image in the admin preview
IMAGE_EXTENSIONS = tuple(EXT_TO_MIME)

MAP_EMBED_PREFIX = "https://www.google.com/maps/embed?"


class StorageError(Exception):
    """Upload rejected locally or by the storage backend."""


def get_mime_type(filename: str) -> str:
    """Get MIME type from filename extension."""
    return EXT_TO_MIME.get(Path(filename).suffix.lower(), "application/octet-stream")


def looks_like_image_url(url: Optional[str]) -> bool:
    """True when the URL path ends with a known image extension."""
    if not url:
        return False
    path = url.split("?", 1)[0].split("#", 1)[0].lower()
    return path.endswith(IMAGE_EXTENSIONS)


def is_map_embed(url: Optional[str]) -> bool:
    return bool(url) and url.startswith(MAP_EMBED_PREFIX)


def validate_file(
    file_content: bytes,
    filename: str,
    mime_type: Optional[str] = None,
    max_size: Optional[int] = None,
) -> Tuple[bool, str]:
    """
    Validate an uploaded file.

    Returns (is_valid, error_message).
    """
    if max_size is None:
        max_size = get_settings().max_upload_mb * 1024 * 1024

    if not file_content:
        return False, "File is empty"

    # Check file size
    if len(file_content) > max_size:
        return False, f"File too large. Maximum size is {max_size // (1024 * 1024)}MB"

    # Check MIME type
    actual_mime = mime_type or get_mime_type(filename)
    if actual_mime not in ALLOWED_MIME_TYPES:
        return False, f"Invalid file type. Allowed types: {', '.join(ALLOWED_MIME_TYPES)}"

    return True, ""


def build_storage_path(folder: str, original_filename: str, mime_type: str) -> str:
    """{folder}/{epoch ms}-{uuid}{ext}"""
    ext = MIME_TO_EXT.get(mime_type, Path(original_filename).suffix.lower())
    return f"{folder}/{int(time.time() * 1000)}-{uuid.uuid4().hex}{ext}"


class StorageClient:
    """Uploads to the public site bucket and resolves public URLs."""

    def __init__(self, client: Client, bucket: Optional[str] = None):
        self._client = client
        self.bucket = bucket or get_settings().storage_bucket

    async def upload_image(
        self,
        file_content: bytes,
        original_filename: str,
        folder: str,
        mime_type: Optional[str] = None,
        max_width: Optional[int] = None,
    ) -> str:
        """
        Upload an image and return its public URL.

        Raster images wider than ``max_width`` are downscaled first.
        """
        if mime_type not in ALLOWED_MIME_TYPES:
            mime_type = get_mime_type(original_filename)

        is_valid, error = validate_file(file_content, original_filename, mime_type)
        if not is_valid:
            raise StorageError(error)

        try:
            file_content = optimize_image(file_content, mime_type, max_width=max_width)
        except ValueError as e:
            raise StorageError(str(e)) from e

        storage_path = build_storage_path(folder, original_filename, mime_type)
        bucket = self._client.storage.from_(self.bucket)

        try:
            await run_in_threadpool(
                bucket.upload,
                path=storage_path,
                file=file_content,
                file_options={
                    "content-type": mime_type,
                    "cache-control": "3600",  # 1 hour cache
                },
            )
        except (StorageException, httpx.HTTPError) as e:
            logger.error(f"Upload of '{storage_path}' failed: {e}")
            raise StorageError(f"Upload failed: {e}") from e

        logger.info(f"Uploaded {len(file_content)} bytes to {self.bucket}/{storage_path}")
        return bucket.get_public_url(storage_path)


# SQL for creating the bucket in Supabase (applied by migration 003)
BUCKET_SETUP_SQL = """
INSERT INTO storage.buckets (id, name, public, file_size_limit, allowed_mime_types)
VALUES (
    'site-assets',
    'site-assets',
    true,
    10485760,
    ARRAY['image/jpeg', 'image/png', 'image/webp', 'image/avif', 'image/gif', 'image/svg+xml']
)
ON CONFLICT (id) DO NOTHING;

CREATE POLICY "Public read access for site assets"
ON storage.objects FOR SELECT
USING (bucket_id = 'site-assets');

CREATE POLICY "Authenticated users can upload site assets"
ON storage.objects FOR INSERT
WITH CHECK (bucket_id = 'site-assets' AND auth.role() = 'authenticated');
"""
