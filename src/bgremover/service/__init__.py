"""Client for the remote background removal endpoint.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

from .client import (
    BackgroundRemovalError,
    RemovalResult,
    ServiceError,
    ServiceTransportError,
    remove_background,
)

__all__ = [
    'BackgroundRemovalError',
    'RemovalResult',
    'ServiceError',
    'ServiceTransportError',
    'remove_background',
]
