"""
UpdateScheduler — One update routine, many triggers

Triggers:
- a periodic timer (poll interval)
- explicit trigger() calls (focus change, post-command refresh)

Updates never overlap. A trigger arriving while an update is in flight
is coalesced: exactly one follow-up run happens after the current one.
"""

import logging
import threading
from typing import Callable, Optional


logger = logging.getLogger('sentinel.scheduler')


class UpdateScheduler:
    """
    Serializes calls to update_fn.

    Thread-safe. The timer runs on a daemon thread; trigger() may be
    called from any thread, including from inside update_fn.
    """

    def __init__(self, update_fn: Callable[[], object], interval: float = 2.0):
        if interval <= 0:
            raise ValueError("interval must be > 0")
        self.update_fn = update_fn
        self.interval = interval

        self._lock = threading.Lock()
        self._running = False
        self._pending = False

        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.error: Optional[BaseException] = None
        self.runs = 0

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._running

    def trigger(self) -> bool:
        """
        Request an update.

        Returns:
            True if this call ran the update (and any coalesced follow-ups),
            False if it was folded into an update already in flight
        """
        with self._lock:
            if self._running:
                self._pending = True
                logger.debug("Update in flight, coalescing trigger")
                return False
            self._running = True

        try:
            while True:
                self.update_fn()
                self.runs += 1
                with self._lock:
                    if not self._pending:
                        self._running = False
                        break
                    self._pending = False
        except BaseException:
            with self._lock:
                self._running = False
                self._pending = False
            raise

        return True

    def start(self):
        """Run once now, then every interval on a background thread."""
        if self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="sentinel-poll", daemon=True)
        self._thread.start()

    def _loop(self):
        try:
            self.trigger()
            while not self._stop.wait(self.interval):
                self.trigger()
        except Exception as e:
            logger.exception("Update failed, stopping poll loop")
            self.error = e
            self._stop.set()

    def stop(self, timeout: Optional[float] = None):
        """Dispose of the timer. An in-flight update finishes first."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until stop() or a failure. Returns True if stopped."""
        return self._stop.wait(timeout)
