"""Checks applied to a file before it becomes the selected image.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

import logging
from pathlib import Path
from typing import Optional

from bgremover.constants import IMAGE_MIME_PREFIX, MAX_FILE_SIZE
from bgremover.utils import io

from .state import SelectedFile

logger = logging.getLogger(__name__)


class FileValidationError(ValueError):
    """Raised when a file cannot be selected; `key` is a translation key."""

    def __init__(self, key: str, detail: str = ""):
        super().__init__(detail or key)
        self.key = key


def validate_selection(mime_type: Optional[str], size: int) -> Optional[str]:
    """Return the translation key of the violated constraint, or None."""
    if size > MAX_FILE_SIZE:
        return "error.file_too_large"
    if not mime_type or not mime_type.startswith(IMAGE_MIME_PREFIX):
        return "error.invalid_type"
    return None


def load_selection(path: Path) -> SelectedFile:
    """Validate a file on disk and read it into a `SelectedFile`."""
    mime_type = io.guess_mime_type(path)
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise FileValidationError("error.unreadable", str(exc)) from exc

    key = validate_selection(mime_type, size)
    if key is not None:
        logger.info(f"Rejected {path.name} ({mime_type}, {size} bytes): {key}")
        raise FileValidationError(key)

    try:
        content = path.read_bytes()
    except OSError as exc:
        raise FileValidationError("error.unreadable", str(exc)) from exc

    # Re-check in case the file grew between stat and read.
    key = validate_selection(mime_type, len(content))
    if key is not None:
        raise FileValidationError(key)

    logger.info(f"Selected {path.name} ({mime_type}, {len(content)} bytes)")
    return SelectedFile(name=path.name, content=content, mime_type=mime_type)
