"""Application configuration constants.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

from pathlib import Path

# Window configuration
APP_TITLE = "AI Background Remover"
WINDOW_SIZE = "1100x760"

# Previews
PREVIEW_SIZE = 360
CHECKER_TILE = 10  # checkerboard square under transparent results

# Selection limits
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
IMAGE_MIME_PREFIX = "image/"

# Simulated progress
PROGRESS_INTERVAL_MS = 200
PROGRESS_MAX_INCREMENT = 15.0
PROGRESS_CAP = 90.0
PROGRESS_DONE = 100.0

# (upper bound, translation key); the last phase covers 90-100
PROGRESS_PHASES = (
    (30.0, "progress.phase_analyzing"),
    (70.0, "progress.phase_detecting"),
    (90.0, "progress.phase_removing"),
)
PROGRESS_FINAL_PHASE = "progress.phase_finishing"

# Service
REMOVE_BACKGROUND_PATH = "/api/remove-background"
UPLOAD_FIELD = "image"
DEFAULT_SERVICE_URL = "http://127.0.0.1:5000"
DEFAULT_TIMEOUT = 120.0

# Download
DOWNLOAD_PREFIX = "background-removed"
DOWNLOAD_MIME = "image/png"

CONFIG_FILE = Path.home() / ".bgremover_config.json"
DEFAULT_DOWNLOAD_DIR = Path.home() / "Downloads" / "BackgroundRemover"

# Colors for the error banner and phase label
ERROR_COLORS = {
    'background': ("#FDECEA", "#3b1c1f"),
    'border': ("#F5C2C7", "#6b2a30"),
    'text': ("#B02A37", "#ff9ba1"),
}
ACCENT_COLOR = "#7C3AED"
