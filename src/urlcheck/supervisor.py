import itertools
import logging
import threading
from collections.abc import Callable
from datetime import timedelta

from anyio import CancelScope, Event, current_time, from_thread
from anyio.lowlevel import current_token

from urlcheck.exceptions import PollingError, UrlTimeoutError

logger = logging.getLogger(__name__)


PollFunc = Callable[[threading.Event], None]

_thread_counter = itertools.count(1)


def to_seconds(timeout: float | timedelta) -> float:
    """Normalize a caller supplied timeout to seconds."""
    seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
    if seconds < 0:
        raise ValueError(f"timeout must not be negative, got {timeout}")
    return seconds


class _PollThread:
    """
    Runs a poll loop on a daemon thread and reports its end to the event loop.

    Daemon threads never hold up interpreter exit, and each call gets its own thread,
    so no limiter is shared with other to_thread users.
    """

    def __init__(self, poll: PollFunc, cancelled: threading.Event):
        self._poll = poll
        self._cancelled = cancelled
        self._token = current_token()
        self.done = Event()
        self.error: Exception | None = None
        self._thread = threading.Thread(target=self._run, name=f"urlcheck-{next(_thread_counter)}", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def _run(self) -> None:
        error = None
        try:
            self._poll(self._cancelled)
        except Exception as e:
            error = e

        if self._cancelled.is_set():
            # The caller already gave up; nobody awaits the result.
            return

        try:
            from_thread.run_sync(self._finish, error, token=self._token)
        except RuntimeError as e:
            # Event loop closed in the meantime
            logger.debug("Could not report end of %s: %s", self._thread.name, e)

    def _finish(self, error: Exception | None) -> None:
        self.error = error
        self.done.set()


async def run_with_deadline(poll: PollFunc, timeout: float | timedelta, targets: str, condition: str) -> None:
    """
    Run a poll loop on a daemon worker thread and race it against a deadline.

    The deadline is fixed once, when this function is called. The loop gets a
    threading.Event as its cancellation token and must return once the awaited
    condition holds. The token is set on every exit path: if the loop already
    finished this is a no-op, otherwise the loop stops at its next round. When the
    deadline fires first the worker thread is abandoned, so the caller is released
    without waiting for the in-flight probe.

    Args:
        poll: The poll loop, called with the cancellation token.
        timeout: Seconds (or a timedelta) until the deadline.
        targets: Description of the polled URL(s), used in the timeout message.
        condition: The awaited condition, e.g. "be available", used in the timeout message.

    Raises:
        UrlTimeoutError: If the deadline elapsed before the loop returned.
        PollingError: If the loop raised.
    """
    start = current_time()
    deadline = start + to_seconds(timeout)
    cancelled = threading.Event()
    worker = _PollThread(poll, cancelled)

    try:
        with CancelScope(deadline=deadline) as scope:
            worker.start()
            await worker.done.wait()
    finally:
        # No-op when the loop already returned
        cancelled.set()

    if worker.error is not None:
        logger.error("Polling task for %s failed", targets, exc_info=worker.error)
        raise PollingError(f"Polling task for {targets} failed: {worker.error!r}") from worker.error

    if scope.cancelled_caught and not worker.done.is_set():
        elapsed_ms = int((current_time() - start) * 1000)
        message = f"Timed out waiting for {targets} to {condition} after {elapsed_ms} ms"
        logger.debug(message)
        raise UrlTimeoutError(message, targets, elapsed_ms)
