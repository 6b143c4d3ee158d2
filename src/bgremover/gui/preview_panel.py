"""Before/after panels showing the selected image and the result.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

import logging
from typing import Optional

import customtkinter as ctk
from PIL import Image

from ..constants import PREVIEW_SIZE
from ..i18n import Translator
from ..session.state import SelectedFile
from ..utils import io

logger = logging.getLogger(__name__)


class PreviewPanel(ctk.CTkFrame):
    """Two side-by-side image slots; owns the preview images it renders."""

    def __init__(self, parent, translator: Translator):
        super().__init__(parent, fg_color="transparent")

        self.translator = translator
        self._shown_file: Optional[SelectedFile] = None
        self._shown_result: Optional[str] = None
        self._original_image: Optional[ctk.CTkImage] = None
        self._processed_image: Optional[ctk.CTkImage] = None
        self._placeholder = self._to_ctk_image(Image.new("RGB", (PREVIEW_SIZE, PREVIEW_SIZE), color="#e5e5e5"))

        self.translator.register(self._update_texts)
        self._create_widgets()

    def _create_widgets(self):
        self.grid_columnconfigure(0, weight=1, uniform="preview_col")
        self.grid_columnconfigure(1, weight=1, uniform="preview_col")

        header_font = ctk.CTkFont(size=14, weight="bold")

        self.original_title = ctk.CTkLabel(self, font=header_font, anchor="w")
        self.original_title.grid(row=0, column=0, sticky="ew", padx=(0, 8))
        self.original_label = self._make_slot()
        self.original_label.grid(row=1, column=0, sticky="nsew", padx=(0, 8), pady=(4, 0))

        self.processed_title = ctk.CTkLabel(self, font=header_font, anchor="w")
        self.processed_label = self._make_slot()

        self._update_texts()

    def _make_slot(self) -> ctk.CTkLabel:
        return ctk.CTkLabel(
            self,
            text="",
            image=self._placeholder,
            width=PREVIEW_SIZE,
            height=PREVIEW_SIZE,
            corner_radius=12,
            fg_color=("gray92", "gray20"),
        )

    def _to_ctk_image(self, img: Image.Image) -> ctk.CTkImage:
        return ctk.CTkImage(light_image=img, dark_image=img, size=img.size)

    def show_original(self, selected: Optional[SelectedFile]):
        """Render the selected file, releasing the previous preview."""
        if selected is self._shown_file:
            return
        self._shown_file = selected
        self._release_original()
        if selected is None:
            return

        try:
            img = io.load_preview(selected.content, PREVIEW_SIZE)
        except (OSError, ValueError) as exc:
            logger.warning("Could not render preview for %s: %s", selected.name, exc)
            img = Image.new('RGB', (PREVIEW_SIZE, PREVIEW_SIZE), color='gray')

        self._original_image = self._to_ctk_image(img)
        self.original_label.configure(image=self._original_image)

    def show_result(self, data_url: Optional[str]):
        """Render the processed image over a checkerboard, or hide the slot."""
        if data_url == self._shown_result:
            return
        self._shown_result = data_url
        self._release_processed()
        if data_url is None:
            self.processed_title.grid_remove()
            self.processed_label.grid_remove()
            return

        try:
            img = io.load_preview(io.decode_data_url(data_url), PREVIEW_SIZE)
            img = io.compose_on_checkerboard(img)
        except (OSError, ValueError) as exc:
            logger.warning("Could not render processed image: %s", exc)
            img = Image.new('RGB', (PREVIEW_SIZE, PREVIEW_SIZE), color='gray')

        self._processed_image = self._to_ctk_image(img)
        self.processed_label.configure(image=self._processed_image)
        self.processed_title.grid(row=0, column=1, sticky="ew", padx=(8, 0))
        self.processed_label.grid(row=1, column=1, sticky="nsew", padx=(8, 0), pady=(4, 0))

    def _release_original(self):
        self.original_label.configure(image=self._placeholder)
        self._original_image = None

    def _release_processed(self):
        self.processed_label.configure(image=self._placeholder)
        self._processed_image = None

    def clear(self):
        """Drop both previews."""
        self.show_original(None)
        self.show_result(None)

    def _update_texts(self):
        self.original_title.configure(text=self.translator.translate("preview.original"))
        self.processed_title.configure(text=self.translator.translate("preview.processed"))
