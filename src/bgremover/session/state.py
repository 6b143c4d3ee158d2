"""Session state and the pure transition function driving the workflow.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.

Every user action and service outcome is expressed as an action object and
folded into an immutable `ClientState` by `reduce`. The reducer knows nothing
about widgets, threads or HTTP, so the workflow can be exercised directly:

    state = reduce(INITIAL_STATE, FileSelected(file))
    state = reduce(state, SubmitStarted())
    state = reduce(state, SubmitSucceeded(state.submission, image))
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from bgremover.constants import (
    PROGRESS_CAP,
    PROGRESS_DONE,
    PROGRESS_FINAL_PHASE,
    PROGRESS_PHASES,
)


class ProcessingState(Enum):
    """Stages of the upload/process workflow."""
    IDLE = "idle"                  # Nothing selected
    SELECTED = "selected"          # File attached, ready to submit (or retry)
    PROCESSING = "processing"      # Request outstanding
    COMPLETED = "completed"        # Result available


@dataclass(frozen=True)
class SelectedFile:
    """The image chosen by the user."""
    name: str
    content: bytes
    mime_type: str

    @property
    def size(self) -> int:
        """Return size in bytes."""
        return len(self.content)

    def __repr__(self) -> str:
        return f"SelectedFile(name={self.name!r}, mime_type={self.mime_type!r}, size={self.size})"


@dataclass(frozen=True)
class ClientState:
    """Snapshot of the whole session.

    `error_key` is set when `error` is a local translation, so the message
    can follow language changes. `submission` survives `Reset`; two states
    are the same workflow state when they differ only in that counter.
    """
    selected_file: Optional[SelectedFile] = None
    processing_state: ProcessingState = ProcessingState.IDLE
    progress: float = 0.0
    result: Optional[str] = None
    error: Optional[str] = None
    error_key: Optional[str] = None
    submission: int = 0

    @property
    def is_processing(self) -> bool:
        return self.processing_state is ProcessingState.PROCESSING

    @property
    def can_submit(self) -> bool:
        return self.selected_file is not None and not self.is_processing

    @property
    def has_result(self) -> bool:
        return self.result is not None


INITIAL_STATE = ClientState()


@dataclass(frozen=True)
class FileSelected:
    file: SelectedFile


@dataclass(frozen=True)
class FileRejected:
    message: str
    key: Optional[str] = None


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class ProgressTicked:
    submission: int
    increment: float


@dataclass(frozen=True)
class SubmitSucceeded:
    submission: int
    image: str


@dataclass(frozen=True)
class SubmitFailed:
    submission: int
    message: str
    key: Optional[str] = None


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class ErrorDismissed:
    pass


Action = Union[
    FileSelected,
    FileRejected,
    SubmitStarted,
    ProgressTicked,
    SubmitSucceeded,
    SubmitFailed,
    Reset,
    ErrorDismissed,
]


def _is_current(state: ClientState, submission: int) -> bool:
    return state.is_processing and submission == state.submission


def reduce(state: ClientState, action: Action) -> ClientState:
    """Return the state that results from applying `action` to `state`.

    Actions that are not valid in the current state return `state` unchanged.
    """
    if isinstance(action, Reset):
        # Keep the counter so late responses of the abandoned request stay stale.
        return replace(INITIAL_STATE, submission=state.submission)

    if isinstance(action, ErrorDismissed):
        return replace(state, error=None, error_key=None)

    if isinstance(action, FileSelected):
        if state.is_processing:
            return state
        return replace(
            state,
            selected_file=action.file,
            processing_state=ProcessingState.SELECTED,
            progress=0.0,
            result=None,
            error=None,
            error_key=None,
        )

    if isinstance(action, FileRejected):
        if state.is_processing:
            return state
        return replace(state, error=action.message, error_key=action.key)

    if isinstance(action, SubmitStarted):
        if not state.can_submit:
            return state
        return replace(
            state,
            processing_state=ProcessingState.PROCESSING,
            progress=0.0,
            result=None,
            error=None,
            error_key=None,
            submission=state.submission + 1,
        )

    if isinstance(action, ProgressTicked):
        if not _is_current(state, action.submission):
            return state
        progress = min(state.progress + max(action.increment, 0.0), PROGRESS_CAP)
        return replace(state, progress=progress)

    if isinstance(action, SubmitSucceeded):
        if not _is_current(state, action.submission):
            return state
        return replace(
            state,
            processing_state=ProcessingState.COMPLETED,
            progress=PROGRESS_DONE,
            result=action.image,
            error=None,
            error_key=None,
        )

    if isinstance(action, SubmitFailed):
        if not _is_current(state, action.submission):
            return state
        return replace(
            state,
            processing_state=ProcessingState.SELECTED,
            progress=0.0,
            result=None,
            error=action.message,
            error_key=action.key,
        )

    raise TypeError(f"Unknown action: {action!r}")


def progress_phase_key(progress: float) -> str:
    """Return the translation key of the phase label for a progress value."""
    for upper, key in PROGRESS_PHASES:
        if progress < upper:
            return key
    return PROGRESS_FINAL_PHASE
