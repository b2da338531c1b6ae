"""Cancellable deferred callbacks keyed by container id.

Both schedulers expose the same interface:

- ``schedule(key, delay, callback)`` arms a callback, replacing any pending
  callback for the same key
- ``cancel(key)`` disarms it and reports whether one was pending
- ``pending(key)`` tells whether a callback is armed
- ``join(timeout)`` waits until every armed callback has fired
- ``shutdown()`` disarms everything

``TimerScheduler`` runs callbacks on wall-clock timer threads.
``ManualScheduler`` keeps a logical clock that only moves when ``advance`` is
called, which makes startup sequencing deterministic.
"""

import itertools
import logging
import threading
import time
from typing import Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class TimerScheduler:
    """Scheduler backed by daemon ``threading.Timer`` objects."""

    def __init__(self):
        self._timers: Dict[str, threading.Timer] = {}
        self._lock = threading.Lock()

    def schedule(self, key: str, delay: float, callback: Callable[[], None]) -> None:
        def fire():
            with self._lock:
                # A replaced or cancelled timer may still wake up; ignore it.
                if self._timers.get(key) is not timer:
                    logger.debug(f"Ignoring stale timer for {key}")
                    return
            try:
                callback()
            finally:
                # Stay registered until the callback is done so join() waits for it.
                with self._lock:
                    if self._timers.get(key) is timer:
                        del self._timers[key]

        with self._lock:
            existing = self._timers.pop(key, None)
            if existing:
                existing.cancel()
            timer = threading.Timer(delay, fire)
            timer.daemon = True
            self._timers[key] = timer
            timer.start()
        logger.debug(f"Scheduled callback for {key} in {delay}s")

    def cancel(self, key: str) -> bool:
        with self._lock:
            timer = self._timers.pop(key, None)
        if timer is None:
            return False
        timer.cancel()
        logger.debug(f"Cancelled callback for {key}")
        return True

    def pending(self, key: str) -> bool:
        with self._lock:
            return key in self._timers

    def join(self, timeout: Optional[float] = None) -> None:
        """Wait for pending timers, for at most ``timeout`` seconds in total."""
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._lock:
            timers = list(self._timers.values())
        for timer in timers:
            if deadline is None:
                timer.join()
                continue
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            timer.join(remaining)

    def shutdown(self) -> None:
        """Cancel every pending timer."""
        with self._lock:
            timers = list(self._timers.values())
            self._timers.clear()
        for timer in timers:
            timer.cancel()


class ManualScheduler:
    """Scheduler driven by a logical clock."""

    def __init__(self):
        self.time = 0.0
        self._entries: Dict[str, Tuple[float, int, Callable[[], None]]] = {}
        self._sequence = itertools.count()

    def schedule(self, key: str, delay: float, callback: Callable[[], None]) -> None:
        self._entries[key] = (self.time + delay, next(self._sequence), callback)

    def cancel(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def pending(self, key: str) -> bool:
        return key in self._entries

    def advance(self, seconds: float) -> int:
        """Move the logical clock forward, firing due callbacks in due order.

        Returns:
            Number of callbacks fired
        """
        target = self.time + seconds
        fired = 0
        while True:
            due = [
                (due_at, order, key)
                for key, (due_at, order, _) in self._entries.items()
                if due_at <= target
            ]
            if not due:
                break
            due_at, _, key = min(due)
            _, _, callback = self._entries.pop(key)
            self.time = due_at
            callback()
            fired += 1
        self.time = target
        return fired

    def shutdown(self) -> None:
        self._entries.clear()

    def join(self, timeout: Optional[float] = None) -> None:
        while self._entries:
            latest = max(due_at for due_at, _, _ in self._entries.values())
            self.advance(max(latest - self.time, 0.0))
