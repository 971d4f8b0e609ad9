"""Palette tokens, painted icons and stylesheets for the registry window."""

from .contrast import contrast_ratio, toast_contrast
from .icons import icon_close, severity_icon
from .qss_helpers import card_qss, toast_qss, window_qss
from .tokens import TOAST_SWATCHES, ToastSwatch

__all__ = [
    'contrast_ratio',
    'toast_contrast',
    'icon_close',
    'severity_icon',
    'card_qss',
    'toast_qss',
    'window_qss',
    'TOAST_SWATCHES',
    'ToastSwatch',
]
