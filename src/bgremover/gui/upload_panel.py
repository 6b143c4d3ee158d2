"""Drop zone accepting an image by click or drag and drop.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

import logging
from tkinter import filedialog
from pathlib import Path
from typing import Callable, Optional

import customtkinter as ctk
from tkinterdnd2 import DND_FILES

from ..constants import ACCENT_COLOR
from ..i18n import Translator
from ..utils import io

logger = logging.getLogger(__name__)


class UploadPanel(ctk.CTkFrame):
    """Drop zone that hands a picked or dropped path to `on_select`."""

    def __init__(
        self,
        parent,
        translator: Translator,
        on_select: Callable[[Path], None],
        enable_drop: bool = True,
    ):
        super().__init__(
            parent,
            corner_radius=14,
            fg_color=("gray98", "gray16"),
            border_width=2,
            border_color=("gray75", "gray35"),
        )

        self.translator = translator
        self.on_select = on_select
        self.last_directory: Optional[Path] = None
        self.image_patterns = " ".join(f"*{ext}" for ext in io.get_supported_image_extensions())

        self.translator.register(self._update_texts)
        self._create_widgets()
        if enable_drop:
            self._register_drop_target()

    def _create_widgets(self):
        """Create the drop zone content."""
        self.icon_label = ctk.CTkLabel(
            self,
            text="⇪",
            text_color=ACCENT_COLOR,
            font=ctk.CTkFont(size=48, weight="bold"),
        )
        self.icon_label.pack(pady=(40, 8))

        self.title_label = ctk.CTkLabel(self, font=ctk.CTkFont(size=20, weight="bold"))
        self.title_label.pack(pady=(0, 4))

        self.hint_label = ctk.CTkLabel(self, text_color=("gray40", "gray70"))
        self.hint_label.pack(pady=(0, 14))

        self.choose_btn = ctk.CTkButton(
            self,
            command=self.open_file_dialog,
            fg_color=ACCENT_COLOR,
            height=38,
        )
        self.choose_btn.pack()

        self.formats_label = ctk.CTkLabel(self, font=ctk.CTkFont(size=11), text_color=("gray50", "gray60"))
        self.formats_label.pack(pady=(14, 40))

        for widget in (self, self.icon_label, self.title_label, self.hint_label, self.formats_label):
            widget.bind("<Button-1>", lambda _event: self.open_file_dialog())

        self._update_texts()

    def _register_drop_target(self):
        """Accept files dropped from the system file manager."""
        # Child widgets cover the frame, so each one has to accept drops.
        targets = (self, self.icon_label, self.title_label, self.hint_label, self.formats_label)
        try:
            for widget in targets:
                widget.drop_target_register(DND_FILES)
                widget.dnd_bind("<<DropEnter>>", self._on_drag_enter)
                widget.dnd_bind("<<DropLeave>>", self._on_drag_leave)
                widget.dnd_bind("<<Drop>>", self._on_drop)
        except (AttributeError, RuntimeError) as exc:
            logger.warning("Drag and drop unavailable: %s", exc)

    def _on_drag_enter(self, event):
        self.configure(border_color=ACCENT_COLOR)
        return event.action

    def _on_drag_leave(self, event):
        self.configure(border_color=("gray75", "gray35"))
        return event.action

    def _on_drop(self, event):
        """Handle a drop; only the first file is used."""
        self._on_drag_leave(event)
        paths = self.tk.splitlist(event.data)
        if paths:
            self._choose(Path(paths[0]))
        return event.action

    def open_file_dialog(self):
        """Show the native file picker."""
        file_path = filedialog.askopenfilename(
            title=self.translator.translate("dialog.select_image"),
            initialdir=str(self.last_directory) if self.last_directory else None,
            filetypes=[
                (self.translator.translate("dialog.image_files"), self.image_patterns),
                (self.translator.translate("dialog.all_files"), "*.*"),
            ],
        )
        if file_path:
            self._choose(Path(file_path))

    def _choose(self, path: Path):
        self.last_directory = path.parent
        self.on_select(path)

    def clear_selection(self):
        """Forget the remembered picker location."""
        self.last_directory = None

    def _update_texts(self):
        """Refresh labels based on current language."""
        self.title_label.configure(text=self.translator.translate("upload.title"))
        self.hint_label.configure(text=self.translator.translate("upload.hint"))
        self.choose_btn.configure(text=self.translator.translate("control.choose"))
        self.formats_label.configure(text=self.translator.translate("upload.formats"))
