"""Painted icons for toasts and the close button."""
from __future__ import annotations

import functools
from typing import Callable

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QIcon, QPainter, QPen, QPixmap, QPolygonF

from .tokens import ICON_SIZE_MD, ICON_SIZE_SM, TOAST_SWATCHES


Painter = QPainter
DrawFn = Callable[[Painter, QRectF], None]


def _make_icon(draw_fn: DrawFn, size: int = ICON_SIZE_MD) -> QIcon:
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.GlobalColor.transparent)
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
    draw_fn(painter, QRectF(0, 0, size, size))
    painter.end()
    return QIcon(pixmap)


def _outline_pen(color: QColor, width: float = 2.0) -> QPen:
    pen = QPen(color)
    pen.setWidthF(width)
    pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    return pen


def _ring(p: Painter, rect: QRectF, color: QColor) -> QRectF:
    inset = rect.adjusted(2, 2, -2, -2)
    p.setPen(_outline_pen(color))
    p.setBrush(Qt.BrushStyle.NoBrush)
    p.drawEllipse(inset)
    return inset


@functools.lru_cache(maxsize=None)
def icon_success() -> QIcon:
    """Check mark inside a circle."""

    def _draw(p: Painter, rect: QRectF) -> None:
        inset = _ring(p, rect, QColor(TOAST_SWATCHES["success"].icon))
        w, h = inset.width(), inset.height()
        p.drawPolyline(QPolygonF([
            QPointF(inset.left() + w * 0.3, inset.top() + h * 0.52),
            QPointF(inset.left() + w * 0.45, inset.top() + h * 0.67),
            QPointF(inset.left() + w * 0.72, inset.top() + h * 0.38),
        ]))
    return _make_icon(_draw, ICON_SIZE_MD)


@functools.lru_cache(maxsize=None)
def icon_error() -> QIcon:
    """Exclamation mark inside a circle."""

    def _draw(p: Painter, rect: QRectF) -> None:
        inset = _ring(p, rect, QColor(TOAST_SWATCHES["error"].icon))
        c = inset.center()
        h = inset.height()
        p.drawLine(QPointF(c.x(), c.y() - h * 0.22), QPointF(c.x(), c.y() + h * 0.05))
        p.drawPoint(QPointF(c.x(), c.y() + h * 0.22))
    return _make_icon(_draw, ICON_SIZE_MD)


@functools.lru_cache(maxsize=None)
def icon_info() -> QIcon:
    """Lowercase ``i`` inside a circle."""

    def _draw(p: Painter, rect: QRectF) -> None:
        inset = _ring(p, rect, QColor(TOAST_SWATCHES["info"].icon))
        c = inset.center()
        h = inset.height()
        p.drawPoint(QPointF(c.x(), c.y() - h * 0.22))
        p.drawLine(QPointF(c.x(), c.y() - h * 0.05), QPointF(c.x(), c.y() + h * 0.22))
    return _make_icon(_draw, ICON_SIZE_MD)


@functools.lru_cache(maxsize=None)
def icon_close() -> QIcon:
    def _draw(p: Painter, rect: QRectF) -> None:
        p.setPen(_outline_pen(QColor("#9CA3AF"), 1.8))
        inset = rect.adjusted(4, 4, -4, -4)
        p.drawLine(inset.topLeft(), inset.bottomRight())
        p.drawLine(inset.topRight(), inset.bottomLeft())
    return _make_icon(_draw, ICON_SIZE_SM)


SEVERITY_ICONS: dict[str, Callable[[], QIcon]] = {
    "success": icon_success,
    "error": icon_error,
    "info": icon_info,
}


def severity_icon(severity: str) -> QIcon:
    return SEVERITY_ICONS.get(severity, icon_info)()


__all__ = [
    "icon_success",
    "icon_error",
    "icon_info",
    "icon_close",
    "SEVERITY_ICONS",
    "severity_icon",
]
