from .toast_queue import ToastQueue
from .lifecycle import ToastLifecycle
from .provider import ContextMissing, ToastProvider, use_toast
from .scheduler import QtScheduler, VirtualScheduler

__all__ = [
    "ToastQueue",
    "ToastLifecycle",
    "ContextMissing",
    "ToastProvider",
    "use_toast",
    "QtScheduler",
    "VirtualScheduler",
]
