"""Build script for creating a standalone app bundle using PyInstaller.

Usage:
    python build_app.py
"""

import PyInstaller.__main__
from pathlib import Path

# Get project root
project_root = Path(__file__).parent

# PyInstaller options
options = [
    # Entry point
    'src/bgremover/gui/launcher.py',

    # App name
    '--name=BackgroundRemover',

    # Create .app bundle (macOS)
    '--windowed',

    # One directory mode (easier to debug)
    '--onedir',

    # Clean build
    '--clean',

    # Don't confirm overwrites
    '--noconfirm',

    # Make the src layout importable during analysis
    f'--paths={project_root / "src"}',

    # Hidden imports (for modules without data files)
    '--hidden-import=bgremover.gui',
    '--hidden-import=bgremover.session',
    '--hidden-import=bgremover.service',
    '--hidden-import=bgremover.utils',
    '--hidden-import=PIL._tkinter_finder',

    # Collect all from these packages (themes and the native tkdnd library)
    '--collect-all=customtkinter',
    '--collect-all=tkinterdnd2',

    # Output directory
    '--distpath=dist',
    '--workpath=build',
    '--specpath=build',
]

if __name__ == '__main__':
    PyInstaller.__main__.run(options)

    print("\n" + "="*60)
    print("✅ Build complete!")
    print("="*60)
    print(f"\nApp location: {project_root}/dist/BackgroundRemover")
    print("\nTo run:")
    print("  open dist/BackgroundRemover.app  (macOS)")
    print("  dist/BackgroundRemover/BackgroundRemover  (Linux / Windows)")
    print("="*60)
