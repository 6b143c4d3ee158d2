"""Action buttons below the previews.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

from typing import Callable

import customtkinter as ctk

from ..constants import ACCENT_COLOR
from ..i18n import Translator


class ControlPanel(ctk.CTkFrame):
    """Submit, download and new-image buttons built with CustomTkinter."""

    def __init__(
        self,
        parent,
        translator: Translator,
        on_submit: Callable[[], None],
        on_download: Callable[[], None],
        on_new_image: Callable[[], None],
    ):
        super().__init__(parent, fg_color="transparent")

        self.translator = translator
        self.on_submit = on_submit
        self.on_download = on_download
        self.on_new_image = on_new_image
        self.button_font = ctk.CTkFont(size=13, weight="bold")

        self.translator.register(self._update_texts)
        self._create_widgets()

    def _create_widgets(self):
        """Create action buttons."""
        self.submit_btn = ctk.CTkButton(
            self,
            command=self.on_submit,
            fg_color=ACCENT_COLOR,
            height=42,
            font=self.button_font,
        )

        self.download_btn = ctk.CTkButton(
            self,
            command=self.on_download,
            fg_color="#F97316",
            hover_color="#EA580C",
            height=42,
            font=self.button_font,
        )

        self.new_image_btn = ctk.CTkButton(
            self,
            command=self.on_new_image,
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "gray90"),
            height=42,
            font=self.button_font,
        )

        self._update_texts()

    def set_state(self, can_submit: bool, has_result: bool, is_processing: bool):
        """Show the buttons that apply to the current workflow stage."""
        for button in (self.submit_btn, self.download_btn, self.new_image_btn):
            button.pack_forget()

        if has_result:
            self.download_btn.pack(side="left", padx=6, pady=6)
            self.new_image_btn.pack(side="left", padx=6, pady=6)
        elif not is_processing:
            self.submit_btn.configure(state="normal" if can_submit else "disabled")
            self.submit_btn.pack(side="left", padx=6, pady=6)

    def _update_texts(self):
        """Refresh button texts based on current language."""
        self.submit_btn.configure(text=self.translator.translate("control.submit"))
        self.download_btn.configure(text=self.translator.translate("control.download"))
        self.new_image_btn.configure(text=self.translator.translate("control.new_image"))
