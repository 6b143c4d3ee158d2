"""GUI package for the AI Background Remover.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

from .main_window import BackgroundRemoverGUI

__all__ = ['BackgroundRemoverGUI']
