from .toast_overlay import ToastOverlay
from .toast_widget import ToastWidget

__all__ = ["ToastOverlay", "ToastWidget"]
