"""Debounced autosave of the resume being edited.

Every edit reschedules a single timer. Only when the quiet window passes
without another edit is the latest snapshot saved, so bursts of typing
collapse into one save of the final state.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)

__all__ = ["AUTOSAVE_DELAY_SECONDS", "DebouncedAutosave"]

AUTOSAVE_DELAY_SECONDS = 2.0

T = TypeVar("T")


class _Timer(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], Any]], _Timer]


def _daemon_timer(delay: float, callback: Callable[[], Any]) -> threading.Timer:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    return timer


class DebouncedAutosave(Generic[T]):
    """Save the latest snapshot once edits go quiet.

    Args:
        save: Callable that persists a snapshot.
        delay: Quiet window in seconds.
        timer_factory: Builds the cancellable timer; defaults to a daemon
            :class:`threading.Timer`.

    Attributes:
        is_saving: True while *save* is running.
        last_saved: UTC time of the last successful save.
        last_error: The exception raised by the last failed save, if any.
    """

    def __init__(
        self,
        save: Callable[[T], Any],
        delay: float = AUTOSAVE_DELAY_SECONDS,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        self._save = save
        self.delay = delay
        self._timer_factory = timer_factory or _daemon_timer
        self._lock = threading.Lock()
        self._timer: _Timer | None = None
        self._snapshot: T | None = None
        self._generation = 0
        self.is_saving = False
        self.last_saved: datetime | None = None
        self.last_error: Exception | None = None

    @property
    def pending(self) -> bool:
        """True when a save is scheduled but has not fired yet."""
        return self._timer is not None

    def schedule(self, snapshot: T) -> None:
        """Restart the quiet window with *snapshot* as the value to save."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._snapshot = snapshot
            self._generation += 1
            generation = self._generation
            self._timer = self._timer_factory(self.delay, lambda: self._fire(generation))
            self._timer.start()

    def cancel(self) -> None:
        """Drop the pending save, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._snapshot = None
            self._generation += 1

    def flush(self) -> bool:
        """Save the pending snapshot immediately.

        Returns:
            True if a snapshot was pending and has been handed to *save*.
        """
        with self._lock:
            if self._timer is None:
                return False
            self._timer.cancel()
            snapshot = self._take()
        self._run(snapshot)
        return True

    def _fire(self, generation: int) -> None:
        with self._lock:
            # A timer that fired just before being replaced must not save
            # the newer snapshot early.
            if generation != self._generation:
                return
            snapshot = self._take()
        self._run(snapshot)

    def _take(self) -> T | None:
        snapshot = self._snapshot
        self._timer = None
        self._snapshot = None
        self._generation += 1
        return snapshot

    def _run(self, snapshot: T | None) -> None:
        if snapshot is None:
            return

        self.is_saving = True
        try:
            self._save(snapshot)
        except Exception as exc:
            logger.exception("Auto-save failed")
            self.last_error = exc
        else:
            self.last_saved = datetime.now(UTC)
            self.last_error = None
        finally:
            self.is_saving = False
