#!/usr/bin/env python3
"""Standalone launcher for the Background Remover GUI app.

This is used as the entry point when building standalone applications.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

import sys
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def main():
    """Launch the Background Remover GUI application."""
    try:
        from bgremover.gui.main_window import BackgroundRemoverGUI

        app = BackgroundRemoverGUI()
        app.mainloop()
    except Exception as e:
        logging.error(f"Failed to start Background Remover GUI: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
