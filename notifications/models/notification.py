from __future__ import annotations

import secrets
from dataclasses import dataclass
from enum import Enum
from typing import Container, Literal

Severity = Literal['success', 'error', 'info']

SEVERITIES: tuple[Severity, ...] = ('success', 'error', 'info')

DEFAULT_DURATION_MS = 3000
# Exit animation grace interval; not configurable.
EXIT_GRACE_MS = 300


class ToastState(str, Enum):
    ENTERING = "entering"
    VISIBLE = "visible"
    EXITING = "exiting"
    REMOVED = "removed"


@dataclass(frozen=True)
class Notification:
    id: str
    message: str
    severity: Severity = 'info'
    duration_ms: int = DEFAULT_DURATION_MS


def new_toast_id(active: Container[str] = ()) -> str:
    """Return a short random token not present in ``active``."""
    while True:
        token = secrets.token_hex(4)
        if token not in active:
            return token
