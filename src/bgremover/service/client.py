"""Helper utilities for calling the background removal endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from bgremover.constants import DEFAULT_TIMEOUT, UPLOAD_FIELD

logger = logging.getLogger(__name__)


class BackgroundRemovalError(RuntimeError):
    """Base class for failures talking to the removal service."""


class ServiceError(BackgroundRemovalError):
    """Raised when the service answers with a structured failure."""

    def __init__(self, message: Optional[str], status_code: Optional[int] = None):
        super().__init__(message or f"Service returned status {status_code}")
        self.message = message
        self.status_code = status_code


class ServiceTransportError(BackgroundRemovalError):
    """Raised when the request fails or the response cannot be understood."""


@dataclass
class RemovalResult:
    """Container for service responses."""

    image: str
    status_code: int


def _error_message(data) -> Optional[str]:
    """Return the body's `error` field as text, if it carries one."""
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return None


def _error_field(response: requests.Response) -> Optional[str]:
    try:
        data = response.json()
    except ValueError:
        return None
    return _error_message(data)


def remove_background(
    endpoint: str,
    content: bytes,
    filename: str,
    mime_type: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> RemovalResult:
    """Upload an image and return the service's data-URL encoded result."""
    if not endpoint:
        raise ServiceTransportError("Service endpoint is not configured.")

    http = session or requests
    logger.info("Uploading %s (%d bytes) to %s", filename, len(content), endpoint)

    try:
        response = http.post(
            endpoint,
            files={UPLOAD_FIELD: (filename, content, mime_type)},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise ServiceTransportError(f"Request failed: {exc}") from exc

    if not 200 <= response.status_code < 300:
        message = _error_field(response)
        logger.warning("Service error %s: %s", response.status_code, message)
        raise ServiceError(message, response.status_code)

    try:
        data = response.json()
    except ValueError as exc:
        raise ServiceTransportError("Service response is not valid JSON.") from exc

    if not isinstance(data, dict):
        raise ServiceTransportError("Service response is not a JSON object.")

    if not data.get("success"):
        raise ServiceError(_error_message(data), response.status_code)

    image = data.get("image")
    if not image or not isinstance(image, str):
        raise ServiceTransportError("Service response missing image field.")

    logger.info("Received result for %s (%d chars)", filename, len(image))
    return RemovalResult(image=image, status_code=response.status_code)
