"""Scoped access to the toast queue.

A :class:`ToastProvider` is established once while the root window is being
composed. From then on any widget inside that window can reach the queue with
``use_toast(self)`` without the queue being handed down through every
constructor. Looking the queue up from outside an established scope is a
wiring defect and raises :class:`ContextMissing`.
"""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtWidgets import QWidget

from .toast_queue import ToastQueue


logger = logging.getLogger(__name__)

_ATTR = "_toast_queue"
_root_queue: Optional[ToastQueue] = None


class ContextMissing(RuntimeError):
    """The toast API was requested outside an established ToastProvider."""


class ToastProvider:
    """Attach a :class:`ToastQueue` to ``host`` and render it there.

    With ``root=True`` the queue also becomes the process-wide scope returned
    by ``use_toast()`` when no widget is given. Usable as a context manager;
    leaving the block tears the scope down.
    """

    def __init__(
        self,
        host: QWidget | None = None,
        queue: ToastQueue | None = None,
        *,
        root: bool = True,
    ) -> None:
        self.host = host
        self.queue = queue if queue is not None else ToastQueue(parent=host)
        self.root = root
        self.overlay = None
        self._established = False

    def establish(self) -> ToastQueue:
        global _root_queue
        if self._established:
            return self.queue
        if self.host is not None:
            from notifications.panels.toast_overlay import ToastOverlay

            setattr(self.host, _ATTR, self.queue)
            self.overlay = ToastOverlay(self.queue, self.host)
        if self.root:
            if _root_queue is not None and _root_queue is not self.queue:
                logger.warning("[toast] replacing an existing root toast scope")
            _root_queue = self.queue
        self._established = True
        return self.queue

    def teardown(self) -> None:
        global _root_queue
        if not self._established:
            return
        self.queue.clear()
        if self.overlay is not None:
            self.overlay.detach()
            self.overlay = None
        if self.host is not None and getattr(self.host, _ATTR, None) is self.queue:
            delattr(self.host, _ATTR)
        if _root_queue is self.queue:
            _root_queue = None
        self._established = False

    def __enter__(self) -> ToastQueue:
        return self.establish()

    def __exit__(self, *exc: object) -> None:
        self.teardown()


def use_toast(widget: QWidget | None = None) -> ToastQueue:
    """Return the toast queue in scope for ``widget``.

    With a widget, its parent chain is searched for an established provider.
    Without one, the root scope is returned.
    """
    if widget is not None:
        node: QWidget | None = widget
        while node is not None:
            queue = getattr(node, _ATTR, None)
            if queue is not None:
                return queue
            node = node.parentWidget()
        raise ContextMissing(
            f"use_toast() called from {type(widget).__name__} outside a ToastProvider"
        )
    if _root_queue is None:
        raise ContextMissing("use_toast() called outside a ToastProvider")
    return _root_queue


__all__ = ["ContextMissing", "ToastProvider", "use_toast"]
