from .notification import (
    DEFAULT_DURATION_MS,
    EXIT_GRACE_MS,
    SEVERITIES,
    Notification,
    Severity,
    ToastState,
    new_toast_id,
)

__all__ = [
    "DEFAULT_DURATION_MS",
    "EXIT_GRACE_MS",
    "SEVERITIES",
    "Notification",
    "Severity",
    "ToastState",
    "new_toast_id",
]
