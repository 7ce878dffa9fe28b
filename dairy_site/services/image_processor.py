"""
Image optimization applied before uploads.

Raster images wider than the target width are downscaled and re-encoded in
their own format. Vector and animated formats pass through untouched.
"""

import io
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

# Target widths (pixels) per use
SIZES = {
    "card": 800,        # Product / recipe / blog cards
    "logo": 400,        # Distributor and site logos
    "hero": 1920,       # Full-width hero slides and banners
}

DEFAULT_MAX_WIDTH = SIZES["hero"]

# Quality settings (0-100)
QUALITY = {
    "webp": 80,
    "jpeg": 85,
}

PIL_FORMATS = {
    "image/jpeg": "JPEG",
    "image/png": "PNG",
    "image/webp": "WEBP",
}

# Never re-encoded
PASSTHROUGH_MIME_TYPES = ("image/svg+xml", "image/gif", "image/avif")


def get_dimensions_for_width(original_width: int, original_height: int, target_width: int) -> Tuple[int, int]:
    """Calculate new dimensions maintaining aspect ratio."""
    if target_width >= original_width:
        return original_width, original_height

    ratio = target_width / original_width
    new_height = int(original_height * ratio)
    return target_width, new_height


def resize_image(img: Image.Image, target_width: int) -> Image.Image:
    """Resize image to target width maintaining aspect ratio."""
    original_width, original_height = img.size
    new_width, new_height = get_dimensions_for_width(original_width, original_height, target_width)

    if new_width == original_width:
        return img

    # Use high-quality downsampling
    return img.resize((new_width, new_height), Image.Resampling.LANCZOS)


def convert_to_rgb(img: Image.Image) -> Image.Image:
    """Convert image to RGB mode if necessary (required for JPEG)."""
    if img.mode in ("RGBA", "P", "LA"):
        # White background for transparent images
        img = img.convert("RGBA")
        background = Image.new("RGB", img.size, (255, 255, 255))
        background.paste(img, mask=img.split()[-1])
        return background
    elif img.mode != "RGB":
        return img.convert("RGB")
    return img


def encode(img: Image.Image, pil_format: str) -> bytes:
    buffer = io.BytesIO()
    if pil_format == "JPEG":
        convert_to_rgb(img).save(buffer, format="JPEG", quality=QUALITY["jpeg"], optimize=True)
    elif pil_format == "WEBP":
        img.save(buffer, format="WEBP", quality=QUALITY["webp"])
    else:
        img.save(buffer, format=pil_format, optimize=True)
    return buffer.getvalue()


def optimize_image(image_data: bytes, mime_type: str, max_width: Optional[int] = None) -> bytes:
    """
    Return ``image_data`` downscaled to ``max_width`` when it is wider.

    Raises ValueError when the bytes are not a decodable raster image.
    """
    if mime_type in PASSTHROUGH_MIME_TYPES:
        return image_data

    pil_format = PIL_FORMATS.get(mime_type)
    if pil_format is None:
        raise ValueError(f"Unsupported image type: {mime_type}")

    try:
        img = Image.open(io.BytesIO(image_data))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError("The uploaded file is not a valid image") from e

    target_width = max_width or DEFAULT_MAX_WIDTH
    if img.size[0] <= target_width:
        return image_data

    return encode(resize_image(img, target_width), pil_format)
