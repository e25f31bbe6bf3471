"""Linear undo/redo history for the post document.

Keystrokes in one field are coalesced into a single undo step until the
user switches fields or stops typing for ``debounce_delay`` seconds. Bulk
replacements (templates, restored drafts) are always a step of their own.
Any new edit discards the redo branch.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, Tuple

from .constants import ComposerConstants
from .document import PostDocument

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Runs a callback once after a delay; the returned handle cancels it."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class ThreadingScheduler:
    """Scheduler backed by ``threading.Timer``."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


@dataclass
class _ManualTimer:
    due: float
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler driven by a virtual clock.

    Nothing fires until ``advance`` moves the clock past a timer's due time.
    Used by tests and by headless callers that own their event loop.
    """

    def __init__(self):
        self.now = 0.0
        self._timers: List[_ManualTimer] = []

    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        timer = _ManualTimer(due=self.now + delay, callback=callback)
        self._timers.append(timer)
        return timer

    @property
    def pending(self) -> int:
        return sum(1 for t in self._timers if not t.cancelled)

    def advance(self, seconds: float) -> None:
        self.now += seconds
        due = [t for t in self._timers if not t.cancelled and t.due <= self.now]
        self._timers = [t for t in self._timers if not t.cancelled and t.due > self.now]
        for timer in sorted(due, key=lambda t: t.due):
            if not timer.cancelled:
                timer.callback()


@dataclass
class _PendingEdit:
    field_name: str
    before: PostDocument


@dataclass
class HistoryState:
    past: List[PostDocument] = field(default_factory=list)
    present: PostDocument = field(default_factory=PostDocument)
    future: List[PostDocument] = field(default_factory=list)


class HistoryManager:
    """Owns the current document and its bounded undo/redo stacks."""

    def __init__(
        self,
        initial: Optional[PostDocument] = None,
        *,
        max_history: int = ComposerConstants.MAX_HISTORY,
        debounce_delay: float = ComposerConstants.DEBOUNCE_DELAY,
        scheduler: Optional[Scheduler] = None,
    ):
        if max_history < 1:
            raise ValueError("max_history must be at least 1")
        self._state = HistoryState(present=initial or PostDocument())
        self._max_history = max_history
        self._debounce_delay = debounce_delay
        self._scheduler: Scheduler = scheduler or ThreadingScheduler()
        self._pending: Optional[_PendingEdit] = None
        self._timer: Optional[TimerHandle] = None
        self._timer_generation = 0
        # Timer callbacks may arrive from another thread
        self._lock = threading.RLock()

    @property
    def document(self) -> PostDocument:
        return self._state.present

    @property
    def past(self) -> Tuple[PostDocument, ...]:
        return tuple(self._state.past)

    @property
    def future(self) -> Tuple[PostDocument, ...]:
        return tuple(self._state.future)

    @property
    def can_undo(self) -> bool:
        with self._lock:
            return bool(self._state.past) or self._pending_changed()

    @property
    def can_redo(self) -> bool:
        return bool(self._state.future)

    @property
    def has_pending_edit(self) -> bool:
        return self._pending is not None

    def set_field(self, field_name: str, value: str) -> None:
        """Edit one field, coalescing with the pending edit to the same field."""
        if field_name not in ComposerConstants.FIELDS:
            raise ValueError(f"Unknown field: {field_name!r}")
        with self._lock:
            self._cancel_timer()
            if self._pending is not None and self._pending.field_name != field_name:
                self._commit_pending()
            if self._pending is None:
                self._pending = _PendingEdit(field_name=field_name, before=self._state.present)
            self._state.present = self._state.present.replace_field(field_name, value)
            self._state.future.clear()
            generation = self._timer_generation
            self._timer = self._scheduler.schedule(
                self._debounce_delay, lambda: self._on_timer(generation)
            )

    def set_all(self, document: PostDocument) -> None:
        """Replace the whole document as one atomic undo step."""
        with self._lock:
            self._cancel_timer()
            self._commit_pending()
            before = self._state.present
            self._state.present = document
            self._push_past(before)
            self._state.future.clear()
            logger.debug("Bulk replacement committed")

    def commit(self) -> None:
        """Turn the pending coalesced edit into an undo step now."""
        with self._lock:
            self._cancel_timer()
            self._commit_pending()

    def undo(self) -> bool:
        with self._lock:
            self._cancel_timer()
            self._commit_pending()
            if not self._state.past:
                return False
            self._state.future.insert(0, self._state.present)
            self._state.present = self._state.past.pop()
            logger.debug("Undo: %d steps left", len(self._state.past))
            return True

    def redo(self) -> bool:
        with self._lock:
            self._cancel_timer()
            self._commit_pending()
            if not self._state.future:
                return False
            self._push_past(self._state.present)
            self._state.present = self._state.future.pop(0)
            logger.debug("Redo: %d steps left", len(self._state.future))
            return True

    def set_scheduler(self, scheduler: Scheduler) -> None:
        """Use another timer source; the pending edit is committed first."""
        with self._lock:
            self._cancel_timer()
            self._commit_pending()
            self._scheduler = scheduler

    def _on_timer(self, generation: int) -> None:
        with self._lock:
            # A threading.Timer may fire after it was cancelled
            if generation != self._timer_generation:
                return
            self._timer = None
            self._commit_pending()

    def _cancel_timer(self) -> None:
        self._timer_generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _pending_changed(self) -> bool:
        return self._pending is not None and self._pending.before != self._state.present

    def _commit_pending(self) -> None:
        pending, self._pending = self._pending, None
        if pending is None or pending.before == self._state.present:
            return
        self._push_past(pending.before)
        self._state.future.clear()
        logger.debug("Committed edit to %s", pending.field_name)

    def _push_past(self, document: PostDocument) -> None:
        self._state.past.append(document)
        # Cap history
        if len(self._state.past) > self._max_history:
            self._state.past.pop(0)
            logger.debug("History full, dropped oldest step")
