from __future__ import annotations

import os

# Qt widgets require a platform plugin.  Offscreen avoids libGL dependencies
# inside the test container.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from notifications.services import provider as toast_provider
from notifications.services.scheduler import VirtualScheduler
from notifications.services.toast_queue import ToastQueue


@pytest.fixture(scope="session")
def qt_app() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture()
def clock() -> VirtualScheduler:
    return VirtualScheduler()


@pytest.fixture()
def queue(clock: VirtualScheduler) -> ToastQueue:
    return ToastQueue(scheduler=clock)


@pytest.fixture(autouse=True)
def reset_root_toast_scope():
    previous = toast_provider._root_queue
    toast_provider._root_queue = None
    yield
    toast_provider._root_queue = previous
