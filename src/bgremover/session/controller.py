"""Controller owning the session state, the progress timer and submissions.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

from __future__ import annotations

import logging
import random
import threading
from pathlib import Path
from typing import Any, Callable, List, Optional, Protocol, Tuple, Union

import requests

from bgremover.constants import (
    DEFAULT_TIMEOUT,
    PROGRESS_CAP,
    PROGRESS_INTERVAL_MS,
    PROGRESS_MAX_INCREMENT,
)
from bgremover.i18n import Translator
from bgremover.service.client import (
    RemovalResult,
    ServiceError,
    remove_background,
)
from bgremover.utils import io

from .state import (
    INITIAL_STATE,
    Action,
    ClientState,
    ErrorDismissed,
    FileRejected,
    FileSelected,
    ProgressTicked,
    Reset,
    SelectedFile,
    SubmitFailed,
    SubmitStarted,
    SubmitSucceeded,
    reduce,
)
from .validation import FileValidationError, load_selection

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    """Subset of the Tk `after` API the controller relies on."""

    def after(self, ms: int, func: Callable[..., Any], *args: Any) -> Any:
        ...

    def after_cancel(self, id: Any) -> None:
        ...


class NoResultError(RuntimeError):
    """Raised when a download is requested before a result exists."""


def _start_daemon_thread(target: Callable[..., None], *args: Any) -> None:
    threading.Thread(target=target, args=args, daemon=True).start()


class SessionController:
    """Drives the select / submit / download / reset workflow."""

    def __init__(
        self,
        scheduler: Scheduler,
        translator: Translator,
        endpoint: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        download_dir: Optional[Path] = None,
        http_session: Optional[requests.Session] = None,
        spawn: Callable[..., None] = _start_daemon_thread,
        rng: Optional[random.Random] = None,
    ):
        self.scheduler = scheduler
        self.translator = translator
        self.endpoint = endpoint
        self.timeout = timeout
        self.download_dir = download_dir
        self.http_session = http_session
        self._spawn = spawn
        self._rng = rng or random.Random()

        self._state = INITIAL_STATE
        self._listeners: List[Callable[[ClientState], None]] = []
        self._progress_job: Any = None

    @property
    def state(self) -> ClientState:
        return self._state

    @property
    def timer_active(self) -> bool:
        return self._progress_job is not None

    def subscribe(self, listener: Callable[[ClientState], None]):
        """Register a callback invoked with every new state."""
        self._listeners.append(listener)

    def dispatch(self, action: Action) -> ClientState:
        """Apply an action and notify listeners when the state changed."""
        new_state = reduce(self._state, action)
        if new_state != self._state:
            self._state = new_state
            for listener in list(self._listeners):
                listener(new_state)
        return self._state

    def _t(self, key: str, **kwargs) -> str:
        return self.translator.translate(key, **kwargs)

    # Selection

    def select_path(self, path: Path) -> bool:
        """Validate and select an image from disk; return True if accepted."""
        if self._state.is_processing:
            logger.info(f"Ignoring selection of {path.name} while processing")
            return False
        try:
            selected = load_selection(path)
        except FileValidationError as exc:
            self.dispatch(FileRejected(self._t(exc.key), exc.key))
            return False
        self.dispatch(FileSelected(selected))
        return True

    # Submission

    def submit(self) -> bool:
        """Start processing the selected file; return False if not allowed."""
        if not self._state.can_submit:
            logger.debug("Submit ignored: nothing selected or already processing")
            return False

        state = self.dispatch(SubmitStarted())
        submission = state.submission
        selected = state.selected_file

        self._cancel_progress_timer()
        self._progress_job = self.scheduler.after(
            PROGRESS_INTERVAL_MS, self._tick_progress, submission
        )
        self._spawn(self._run_submission, submission, selected)
        return True

    def _tick_progress(self, submission: int):
        """Advance the cosmetic progress estimate and re-arm the timer."""
        self._progress_job = None
        if not (self._state.is_processing and self._state.submission == submission):
            return

        increment = self._rng.random() * PROGRESS_MAX_INCREMENT
        state = self.dispatch(ProgressTicked(submission, increment))
        if state.progress < PROGRESS_CAP:
            self._progress_job = self.scheduler.after(
                PROGRESS_INTERVAL_MS, self._tick_progress, submission
            )

    def _run_submission(self, submission: int, selected: SelectedFile):
        """Background worker performing the HTTP request."""
        outcome: Union[RemovalResult, Exception]
        try:
            outcome = remove_background(
                self.endpoint,
                selected.content,
                selected.name,
                selected.mime_type,
                timeout=self.timeout,
                session=self.http_session,
            )
        except Exception as exc:
            logger.error(f"Background removal failed for {selected.name}: {exc}")
            outcome = exc

        self.scheduler.after(0, self._finish_submission, submission, outcome)

    def _finish_submission(self, submission: int, outcome: Union[RemovalResult, Exception]):
        """Apply a request outcome on the UI thread."""
        try:
            if isinstance(outcome, RemovalResult):
                self.dispatch(SubmitSucceeded(submission, outcome.image))
            else:
                message, key = self._failure_message(outcome)
                self.dispatch(SubmitFailed(submission, message, key))
        finally:
            if self._state.submission == submission:
                self._cancel_progress_timer()

    def _failure_message(self, exc: Exception) -> Tuple[str, Optional[str]]:
        """Return the message to show and its translation key, if local."""
        if isinstance(exc, ServiceError):
            if exc.message:
                return exc.message, None
            if exc.status_code is not None and 200 <= exc.status_code < 300:
                return self._t("error.processing_failed"), "error.processing_failed"
        return self._t("error.processing"), "error.processing"

    def error_text(self, state: Optional[ClientState] = None) -> Optional[str]:
        """Return the error of `state` in the current language."""
        state = state or self._state
        if state.error_key:
            return self._t(state.error_key)
        return state.error

    def _cancel_progress_timer(self):
        if self._progress_job is not None:
            self.scheduler.after_cancel(self._progress_job)
            self._progress_job = None
            logger.debug("Progress timer cancelled")

    # Result

    def result_bytes(self) -> bytes:
        """Return the decoded processed image."""
        if self._state.result is None:
            raise NoResultError("No processed image to download.")
        return io.decode_data_url(self._state.result)

    def save_result(self, target: Optional[Path] = None) -> Path:
        """Write the processed image to `target` or the download directory."""
        data = self.result_bytes()
        if target is None:
            directory = self.download_dir or Path.cwd()
            target = directory / io.download_filename()
        io.write_bytes(data, target)
        logger.info(f"Saved result to {target}")
        return target

    # Housekeeping

    def dismiss_error(self):
        self.dispatch(ErrorDismissed())

    def reset(self):
        """Return to the initial state from anywhere."""
        self._cancel_progress_timer()
        self.dispatch(Reset())

    def shutdown(self):
        """Release the timer when the owning window goes away."""
        self._cancel_progress_timer()
