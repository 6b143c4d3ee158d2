"""Main application window coordinating all components.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

from tkinter import filedialog, messagebox
from pathlib import Path
from typing import Dict, Optional
import logging

import customtkinter as ctk
from tkinterdnd2 import TkinterDnD

from .control_panel import ControlPanel
from .error_banner import ErrorBanner
from .preview_panel import PreviewPanel
from .progress_panel import ProgressPanel
from .upload_panel import UploadPanel
from ..constants import ACCENT_COLOR, WINDOW_SIZE
from ..config_manager import get_config_manager
from ..i18n import get_translator
from ..session.controller import NoResultError, SessionController
from ..session.state import ClientState, ProcessingState
from ..utils import io

logger = logging.getLogger(__name__)


ctk.set_appearance_mode("system")
ctk.set_default_color_theme("blue")


class BackgroundRemoverGUI(ctk.CTk, TkinterDnD.DnDWrapper):
    """Main GUI application window."""

    def __init__(self):
        super().__init__()

        self.drop_enabled = self._load_dnd()

        self.translator = get_translator()
        self.config_manager = get_config_manager()
        initial_language = self.config_manager.get_language()
        self.translator.set_language(initial_language, notify=False)
        self.translator.register(self._on_language_changed)

        self.title(self._t("app.title"))
        self.geometry(WINDOW_SIZE)

        self.controller = SessionController(
            scheduler=self,
            translator=self.translator,
            endpoint=self.config_manager.get_endpoint(),
            timeout=self.config_manager.get_request_timeout(),
            download_dir=self.config_manager.get_download_directory(),
        )
        self._workspace_visible: Optional[bool] = None
        self.language_options: Dict[str, str] = {}

        self._create_ui()
        self.controller.subscribe(self._render)
        self._render(self.controller.state)
        self.protocol("WM_DELETE_WINDOW", self._on_close)

        logger.info("Using background removal endpoint %s", self.controller.endpoint)

    def _load_dnd(self) -> bool:
        """Load the tkdnd extension into this interpreter."""
        try:
            self.TkdndVersion = TkinterDnD._require(self)
        except RuntimeError as exc:
            logger.warning("tkdnd could not be loaded, drag and drop disabled: %s", exc)
            return False
        return True

    def _create_ui(self):
        """Create main UI layout."""

        self.columnconfigure(0, weight=1)
        self.rowconfigure(2, weight=1)

        self._create_header()

        self.error_banner = ErrorBanner(self, on_dismiss=self.controller.dismiss_error)

        self.card = ctk.CTkFrame(
            self,
            corner_radius=14,
            fg_color=("white", "#1f1f1f"),
            border_width=1,
            border_color=("gray85", "#2c2c2c"),
        )
        self.card.grid(row=2, column=0, sticky="nsew", padx=16, pady=(0, 12))
        self.card.grid_columnconfigure(0, weight=1)
        self.card.grid_rowconfigure(0, weight=1)

        self.upload_panel = UploadPanel(
            self.card,
            translator=self.translator,
            on_select=self.select_image,
            enable_drop=self.drop_enabled,
        )

        self.workspace = ctk.CTkFrame(self.card, fg_color="transparent")
        self.workspace.grid_columnconfigure(0, weight=1)

        self.preview_panel = PreviewPanel(self.workspace, translator=self.translator)
        self.preview_panel.grid(row=0, column=0, sticky="nsew", pady=(0, 12))

        self.progress_panel = ProgressPanel(self.workspace, translator=self.translator)

        self.control_panel = ControlPanel(
            self.workspace,
            translator=self.translator,
            on_submit=self.controller.submit,
            on_download=self.download_result,
            on_new_image=self.reset,
        )
        self.control_panel.grid(row=2, column=0)

        self.status_bar = ctk.CTkLabel(
            self,
            text=self._t("status.ready"),
            anchor="w",
            fg_color=("gray94", "#151515"),
            corner_radius=8,
            padx=14,
            height=34,
        )
        self.status_bar.grid(row=3, column=0, sticky="ew", padx=16, pady=(0, 16))

    def _create_header(self):
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", padx=16, pady=(16, 8))

        title_frame = ctk.CTkFrame(header, fg_color="transparent")
        title_frame.pack(side="left")

        self.title_label = ctk.CTkLabel(
            title_frame,
            font=ctk.CTkFont(size=20, weight="bold"),
            anchor="w",
        )
        self.title_label.pack(fill="x")

        self.subtitle_label = ctk.CTkLabel(
            title_frame,
            font=ctk.CTkFont(size=12),
            text_color=("gray40", "gray70"),
            anchor="w",
        )
        self.subtitle_label.pack(fill="x")

        self.reset_btn = ctk.CTkButton(
            header,
            command=self.reset,
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "gray90"),
            height=34,
            width=110,
        )
        self.reset_btn.pack(side="right", padx=(8, 0))

        self.language_menu = ctk.CTkOptionMenu(
            header,
            values=[],
            command=self._on_language_selected,
            fg_color=ACCENT_COLOR,
            width=110,
        )
        self.language_menu.pack(side="right")

        self.language_label = ctk.CTkLabel(header)
        self.language_label.pack(side="right", padx=(0, 6))

        self._update_header_texts()

    def _update_header_texts(self):
        self.title_label.configure(text=self._t("app.title"))
        self.subtitle_label.configure(text=self._t("app.subtitle"))
        self.reset_btn.configure(text=self._t("control.reset"))
        self.language_label.configure(text=self._t("control.language"))

        names = []
        mapping: Dict[str, str] = {}
        for code in self.translator.available_languages():
            name = self.translator.language_name(code)
            names.append(name)
            mapping[name] = code
        self.language_options = mapping
        self.language_menu.configure(values=names)
        self.language_menu.set(self.translator.language_name(self.translator.language))

    def _render(self, state: ClientState):
        """Project the session state onto the widgets."""
        self._render_error(state)

        show_workspace = state.selected_file is not None
        if show_workspace != self._workspace_visible:
            self._workspace_visible = show_workspace
            if show_workspace:
                self.upload_panel.grid_remove()
                self.workspace.grid(row=0, column=0, sticky="nsew", padx=24, pady=24)
            else:
                self.workspace.grid_remove()
                self.upload_panel.grid(row=0, column=0, sticky="nsew", padx=24, pady=24)

        self.preview_panel.show_original(state.selected_file)
        self.preview_panel.show_result(state.result)

        if state.is_processing:
            self.progress_panel.set_progress(state.progress)
            self.progress_panel.grid(row=1, column=0, sticky="ew", pady=(0, 12))
        else:
            self.progress_panel.grid_remove()

        self.control_panel.set_state(
            can_submit=state.can_submit,
            has_result=state.has_result,
            is_processing=state.is_processing,
        )
        self._update_status_bar(state)

    def _render_error(self, state: ClientState):
        if self.error_banner.set_message(self.controller.error_text(state)):
            self.error_banner.grid(row=1, column=0, sticky="ew", padx=16, pady=(0, 10))
        else:
            self.error_banner.grid_remove()

    def _update_status_bar(self, state: ClientState):
        if state.processing_state is ProcessingState.PROCESSING:
            text = self._t("status.processing")
        elif state.processing_state is ProcessingState.COMPLETED:
            text = self._t("status.completed")
        else:
            text = self._t("status.ready")
        self.status_bar.configure(text=text)

    def select_image(self, path: Path):
        """Hand a picked or dropped file to the controller."""
        self.controller.select_path(path)

    def download_result(self):
        """Ask where to save the processed image and write it."""
        target = filedialog.asksaveasfilename(
            title=self._t("dialog.save_result"),
            initialdir=str(self.config_manager.get_download_directory()),
            initialfile=io.download_filename(),
            defaultextension=".png",
            filetypes=[("PNG", "*.png")],
        )
        if not target:
            return

        try:
            saved = self.controller.save_result(Path(target))
        except (NoResultError, OSError, ValueError) as e:
            logger.error(f"Failed to save result: {e}")
            messagebox.showerror(
                self._t("dialog.error_title"),
                self._t("dialog.save_error", error=e),
            )
            return

        messagebox.showinfo(
            self._t("dialog.saved_title"),
            self._t("dialog.saved_message", path=saved),
        )

    def reset(self):
        """Clear everything and show the drop zone again."""
        self.controller.reset()
        self.upload_panel.clear_selection()
        self.preview_panel.clear()

    def _on_language_selected(self, selected_name: str):
        """Handle user selecting a new language."""
        code = self.language_options.get(selected_name)
        if not code or code == self.translator.language:
            return
        self.config_manager.set_language(code)
        self.translator.set_language(code)

    def _on_language_changed(self):
        """Refresh top-level UI strings when language changes."""
        self.title(self._t("app.title"))
        self._update_header_texts()
        self._render_error(self.controller.state)
        self._update_status_bar(self.controller.state)

    def _on_close(self):
        self.controller.shutdown()
        self.destroy()

    def _t(self, key: str, **kwargs) -> str:
        """Translate helper."""
        return self.translator.translate(key, **kwargs)
