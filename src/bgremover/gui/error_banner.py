"""Dismissible banner showing the current error message.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

from typing import Callable, Optional

import customtkinter as ctk

from ..constants import ERROR_COLORS


class ErrorBanner(ctk.CTkFrame):
    """Red banner with a message and a close button."""

    def __init__(self, parent, on_dismiss: Callable[[], None]):
        super().__init__(
            parent,
            corner_radius=10,
            fg_color=ERROR_COLORS['background'],
            border_width=1,
            border_color=ERROR_COLORS['border'],
        )
        self.on_dismiss = on_dismiss
        self.message: Optional[str] = None
        self._create_widgets()

    def _create_widgets(self):
        self.icon_label = ctk.CTkLabel(
            self,
            text="⚠",
            text_color=ERROR_COLORS['text'],
            font=ctk.CTkFont(size=16, weight="bold"),
            width=24,
        )
        self.icon_label.pack(side="left", padx=(12, 6), pady=10)

        self.message_label = ctk.CTkLabel(
            self,
            text="",
            text_color=ERROR_COLORS['text'],
            anchor="w",
            justify="left",
            wraplength=720,
        )
        self.message_label.pack(side="left", fill="x", expand=True, pady=10)

        self.close_btn = ctk.CTkButton(
            self,
            text="✕",
            width=28,
            height=28,
            fg_color="transparent",
            hover_color=ERROR_COLORS['border'],
            text_color=ERROR_COLORS['text'],
            command=self.on_dismiss,
        )
        self.close_btn.pack(side="right", padx=8)

    def set_message(self, message: Optional[str]) -> bool:
        """Update the text; return True when the banner should be visible."""
        self.message = message
        self.message_label.configure(text=message or "")
        return bool(message)
