"""
export.py: Save a generated image to disk.

File name: <slug-of-prompt>_<YYYYmmdd-HHMMSS>.<ext>, extension from MIME type.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Optional

from .models import GeneratedImage

logger = logging.getLogger(__name__)

_MIME_EXT = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/webp": "webp",
    "image/gif": "gif",
}

_EXT_MIME = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "webp": "image/webp",
    "gif": "image/gif",
}


def extension_for(mime_type: str) -> str:
    return _MIME_EXT.get(mime_type.lower(), "png")


def mime_type_for(path: Path) -> str:
    """Guess an image MIME type from a file suffix (png when unknown)."""
    return _EXT_MIME.get(path.suffix.lower().lstrip("."), "image/png")


def save_image(
    image: GeneratedImage,
    output_dir: Path,
    name: str = "",
    now: Optional[datetime] = None,
) -> Path:
    """Write image bytes under output_dir and return the file path."""
    output_dir.mkdir(parents=True, exist_ok=True)
    stamp = (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
    safe_name = re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_")[:30] or "graphic"
    path = output_dir / f"{safe_name}_{stamp}.{extension_for(image.mime_type)}"
    path.write_bytes(image.image_bytes())
    logger.info(f"image saved: {path.name} ({path.stat().st_size // 1024} KB)")
    return path


def load_image(path: Path) -> GeneratedImage:
    """Read an image file so it can be refined."""
    return GeneratedImage.from_bytes(path.read_bytes(), mime_type_for(path))
