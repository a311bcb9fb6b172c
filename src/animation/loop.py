"""
Debounce and Animation Loop
===========================

Background timing for the viewer. Both objects own at most ONE pending
timer / thread and can always be cancelled:

    Debouncer      - coalesce rapid submissions, fire once with the last value
    AnimationLoop  - call step() every interval until stop()
"""

import threading
import warnings
from typing import Any, Callable, Optional

from .constants import DEBOUNCE_SECONDS, FRAME_INTERVAL, STOP_TIMEOUT


class Debouncer:
    """
    Fire callback(value) once, `delay` seconds after the LAST submit().

    Each submit() cancels the pending timer, so a burst of dimension
    changes triggers a single regeneration.
    """

    def __init__(self, callback: Callable[[Any], None], delay: float = DEBOUNCE_SECONDS):
        self.callback = callback
        self.delay = delay
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._value = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def submit(self, value) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._value = value
            self._timer = threading.Timer(self.delay, self._fire)
            self._timer.args = (self._timer,)
            self._timer.daemon = True
            self._timer.start()

    def _fire(self, timer: threading.Timer) -> None:
        with self._lock:
            # A timer superseded by a later submit() must not fire
            if self._timer is not timer:
                return
            self._timer = None
            value = self._value
        self.callback(value)

    def flush(self) -> None:
        """Fire the pending callback now (no-op if nothing is pending)."""
        with self._lock:
            if self._timer is None:
                return
            self._timer.cancel()
            self._timer = None
            value = self._value
        self.callback(value)

    def cancel(self) -> None:
        """Drop the pending callback."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


class AnimationLoop:
    """
    Call step() every `interval` seconds on a daemon thread.

    stop() sets the shutdown event and joins the thread, so no work keeps
    running after pause or teardown. An exception in step() stops the loop
    and is reported as a UserWarning.

    Each run owns its own stop event. A thread that outlived stop()'s join
    timeout still sees its event set and exits after its current step, and
    start() waits for it before launching the next run.
    """

    def __init__(self, step: Callable[[], None], interval: float = FRAME_INTERVAL):
        self.step = step
        self.interval = interval
        self._stop_event = threading.Event()
        self._stop_event.set()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return (self._thread is not None and self._thread.is_alive()
                and not self._stop_event.is_set())

    def start(self, timeout: float = STOP_TIMEOUT) -> None:
        if self.is_running:
            return
        previous = self._thread
        if previous is not None and previous is not threading.current_thread():
            previous.join(timeout)
            if previous.is_alive():
                warnings.warn(
                    "Previous animation thread still busy after "
                    f"{timeout}s; not starting a second one", UserWarning)
                return
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run, args=(self._stop_event,), daemon=True)
        self._thread.start()

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.is_set():
            try:
                self.step()
            except Exception as exc:
                warnings.warn(f"Animation step failed, stopping loop: {exc!r}", UserWarning)
                stop_event.set()
                break
            # wait() returns early when stop() is called
            stop_event.wait(self.interval)

    def stop(self, timeout: float = STOP_TIMEOUT) -> None:
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        # Keep a thread that is still finishing its step so start() can join it
        if thread is not None and not thread.is_alive():
            self._thread = None
