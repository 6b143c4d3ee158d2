"""Progress bar with phase label shown while a request is outstanding.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

import customtkinter as ctk

from ..constants import ACCENT_COLOR, PROGRESS_DONE
from ..i18n import Translator
from ..session.state import progress_phase_key


class ProgressPanel(ctk.CTkFrame):
    """Panel displaying the simulated processing progress."""

    def __init__(self, parent, translator: Translator):
        super().__init__(parent, fg_color="transparent")

        self.translator = translator
        self.progress = 0.0

        self._create_widgets()
        self.translator.register(self._update_static_texts)
        self._update_static_texts()

    def _create_widgets(self):
        """Create progress indicators."""
        self.title_label = ctk.CTkLabel(
            self,
            font=ctk.CTkFont(size=14, weight="bold"),
            text_color=ACCENT_COLOR,
        )
        self.title_label.pack(fill="x", pady=(0, 8))

        self.progress_bar = ctk.CTkProgressBar(self, height=12, progress_color=ACCENT_COLOR)
        self.progress_bar.pack(fill="x", padx=12, pady=(0, 6))
        self.progress_bar.set(0)

        self.phase_label = ctk.CTkLabel(self, font=ctk.CTkFont(size=12), text_color=("gray40", "gray70"))
        self.phase_label.pack(fill="x")

    def _update_static_texts(self):
        """Refresh labels when language changes."""
        self.title_label.configure(text=self.translator.translate("progress.processing"))
        self._refresh_phase()

    def _refresh_phase(self):
        self.phase_label.configure(
            text=self.translator.translate(progress_phase_key(self.progress))
        )

    def set_progress(self, progress: float):
        """Update bar and phase label for a value in [0, 100]."""
        self.progress = progress
        self.progress_bar.set(min(max(progress, 0.0), PROGRESS_DONE) / PROGRESS_DONE)
        self._refresh_phase()
