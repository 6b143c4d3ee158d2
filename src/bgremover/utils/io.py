"""Contains image and file IO.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
import mimetypes
import time
from pathlib import Path

from PIL import Image

from bgremover.constants import CHECKER_TILE, DOWNLOAD_PREFIX

LOGGER = logging.getLogger(__name__)

# EXIF orientation tag
_ORIENTATION = 274


def guess_mime_type(path: Path) -> str | None:
    """Return the MIME type declared by a filename, if any.

    Image formats the platform table does not know (e.g. `.webp` before
    Python 3.11) are looked up in the formats registered with Pillow.
    """
    mime_type, _ = mimetypes.guess_type(path.name)
    if mime_type is None:
        image_format = Image.registered_extensions().get(path.suffix.lower())
        if image_format is not None:
            mime_type = Image.MIME.get(image_format)
    return mime_type


def decode_data_url(data_url: str) -> bytes:
    """Decode a `data:<mime>;base64,<payload>` string into raw bytes."""
    header, sep, payload = data_url.partition(",")
    if not sep or not header.startswith("data:"):
        raise ValueError("Not a data URL.")
    if not header.endswith(";base64"):
        raise ValueError("Only base64 data URLs are supported.")
    try:
        # Services may wrap long payloads across lines.
        return base64.b64decode("".join(payload.split()), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("Data URL payload is not valid base64.") from exc


def download_filename(timestamp_ms: int | None = None) -> str:
    """Return a collision-resistant filename for a downloaded result."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{DOWNLOAD_PREFIX}-{timestamp_ms}.png"


def write_bytes(data: bytes, output_path: Path) -> Path:
    """Write bytes to disk, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("wb") as file_handle:
        file_handle.write(data)
    LOGGER.debug(f"Wrote {len(data)} bytes to {output_path}")
    return output_path


def load_preview(data: bytes, size: int) -> Image.Image:
    """Decode image bytes into an upright thumbnail no larger than `size`."""
    with Image.open(io.BytesIO(data)) as img_pil:
        exif = img_pil.getexif()
        orientation = exif.get(_ORIENTATION) if exif else None
        if orientation == 3:
            img = img_pil.transpose(Image.ROTATE_180)
        elif orientation == 6:
            img = img_pil.transpose(Image.ROTATE_270)
        elif orientation == 8:
            img = img_pil.transpose(Image.ROTATE_90)
        else:
            img = img_pil.copy()

    img.thumbnail((size, size), Image.Resampling.LANCZOS)
    return img


def compose_on_checkerboard(image: Image.Image, tile: int = CHECKER_TILE) -> Image.Image:
    """Paste an image with alpha over a light checkerboard."""
    rgba = image.convert("RGBA")
    width, height = rgba.size
    board = Image.new("RGBA", (width, height), (255, 255, 255, 255))
    square = Image.new("RGBA", (tile, tile), (240, 240, 240, 255))
    for top in range(0, height, tile):
        for left in range((top // tile) % 2 * tile, width, tile * 2):
            board.paste(square, (left, top))
    board.alpha_composite(rgba)
    return board.convert("RGB")


def get_supported_image_extensions() -> list[str]:
    """Return image extensions Pillow can open."""
    exts = Image.registered_extensions()
    supported_extensions = {ex for ex, f in exts.items() if f in Image.OPEN}
    supported_extensions_upper = {ex.upper() for ex in supported_extensions}
    return sorted(supported_extensions | supported_extensions_upper)
