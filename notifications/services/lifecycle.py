from __future__ import annotations

import logging
from typing import Callable, Optional

from notifications.models.notification import EXIT_GRACE_MS, Notification, ToastState
from .scheduler import TimerHandle, ToastScheduler


logger = logging.getLogger(__name__)


class ToastLifecycle:
    """State machine for one toast: entering -> visible -> exiting -> removed.

    Two one-shot timers drive it. The auto-dismiss timer is cancelled by a
    manual dismissal; the exit timer runs exactly once whichever path led to
    ``exiting`` and then hands the id back through ``on_finished``.
    """

    def __init__(
        self,
        note: Notification,
        scheduler: ToastScheduler,
        on_finished: Callable[[str], None],
        on_state_changed: Optional[Callable[[str, ToastState], None]] = None,
    ) -> None:
        self.note = note
        self._scheduler = scheduler
        self._on_finished = on_finished
        self._on_state_changed = on_state_changed
        self._state = ToastState.ENTERING
        self._dismiss_timer: TimerHandle | None = None
        self._exit_timer: TimerHandle | None = None

    @property
    def state(self) -> ToastState:
        return self._state

    def start(self) -> None:
        if self._state is not ToastState.ENTERING:
            return
        self._set_state(ToastState.VISIBLE)
        self._dismiss_timer = self._scheduler.schedule(self.note.duration_ms, self._expire)

    def dismiss(self) -> None:
        """User-initiated close. Ignored once the toast is already leaving."""
        if self._state not in (ToastState.ENTERING, ToastState.VISIBLE):
            return
        logger.debug("[toast] %s dismissed manually", self.note.id)
        self._begin_exit()

    def cancel(self) -> None:
        """Stop any pending timer without reporting completion."""
        for timer in (self._dismiss_timer, self._exit_timer):
            if timer is not None and timer.active:
                timer.cancel()
        self._dismiss_timer = None
        self._exit_timer = None
        if self._state is not ToastState.REMOVED:
            self._set_state(ToastState.REMOVED)

    # ---- internals ---------------------------------------------------------
    def _expire(self) -> None:
        self._dismiss_timer = None
        if self._state is ToastState.VISIBLE:
            self._begin_exit()

    def _begin_exit(self) -> None:
        if self._dismiss_timer is not None:
            self._dismiss_timer.cancel()
            self._dismiss_timer = None
        self._set_state(ToastState.EXITING)
        self._exit_timer = self._scheduler.schedule(EXIT_GRACE_MS, self._finish)

    def _finish(self) -> None:
        self._exit_timer = None
        if self._state is not ToastState.EXITING:
            return
        self._on_finished(self.note.id)

    def _set_state(self, state: ToastState) -> None:
        self._state = state
        if self._on_state_changed is not None:
            self._on_state_changed(self.note.id, state)


__all__ = ["ToastLifecycle"]
