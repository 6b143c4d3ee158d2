from typing import Any, Callable, Dict, List, Optional, Tuple
from unittest.mock import MagicMock

PNG_DATA_URL = "data:image/png;base64,AAAA"


class FakeScheduler:
    """Records `after` jobs so tests decide when they run."""

    def __init__(self) -> None:
        self.jobs: Dict[str, Tuple[int, Callable[..., Any], tuple]] = {}
        self.cancelled: List[str] = []
        self._counter = 0

    def after(self, ms: int, func: Callable[..., Any], *args: Any) -> str:
        self._counter += 1
        job_id = f"after#{self._counter}"
        self.jobs[job_id] = (ms, func, args)
        return job_id

    def after_cancel(self, job_id: str) -> None:
        self.jobs.pop(job_id, None)
        self.cancelled.append(job_id)

    def pending(self, ms: Optional[int] = None) -> List[str]:
        return [job_id for job_id, (delay, _, _) in self.jobs.items() if ms is None or delay == ms]

    def run(self, ms: Optional[int] = None) -> int:
        """Run the jobs currently queued (optionally only those with delay `ms`)."""
        ran = 0
        for job_id in self.pending(ms):
            job = self.jobs.pop(job_id, None)
            if job is None:
                continue
            _, func, args = job
            func(*args)
            ran += 1
        return ran


class DeferredSpawner:
    """Holds submissions until the test releases them."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Callable[..., None], tuple]] = []

    def __call__(self, target: Callable[..., None], *args: Any) -> None:
        self.calls.append((target, args))

    def release_all(self) -> None:
        calls, self.calls = self.calls, []
        for target, args in calls:
            target(*args)


def run_inline(target: Callable[..., None], *args: Any) -> None:
    target(*args)


def make_response(status_code: int = 200, payload: Any = None, json_error: bool = False) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    if json_error:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = payload
    response.text = "" if payload is None else str(payload)
    return response


def make_session(response: Optional[MagicMock] = None, side_effect: Optional[BaseException] = None) -> MagicMock:
    session = MagicMock()
    if side_effect is not None:
        session.post.side_effect = side_effect
    else:
        session.post.return_value = response
    return session
