"""Rendering-independent session core: state, validation and controller.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

from .controller import NoResultError, SessionController
from .state import ClientState, ProcessingState, SelectedFile
from .validation import FileValidationError

__all__ = [
    'ClientState',
    'FileValidationError',
    'NoResultError',
    'ProcessingState',
    'SelectedFile',
    'SessionController',
]
