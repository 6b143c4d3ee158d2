"""Version information for the Background Remover.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

import sys
from pathlib import Path

__version__ = "1.0.0"


def get_version() -> str:
    """Get the current version of the Background Remover."""
    try:
        # When running from source
        version_file = Path(__file__).parent.parent.parent / "VERSION"
        if version_file.exists():
            return version_file.read_text().strip()

        # PyInstaller stores the bundle location in _MEIPASS
        if getattr(sys, 'frozen', False) and hasattr(sys, '_MEIPASS'):
            version_file = Path(sys._MEIPASS) / "VERSION"
            if version_file.exists():
                return version_file.read_text().strip()
    except OSError:
        pass

    return __version__
