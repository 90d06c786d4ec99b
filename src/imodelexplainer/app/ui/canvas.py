from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import (
    QBrush, QColor, QFont, QLinearGradient, QMouseEvent, QPainter, QPen, QRadialGradient,
)
from PySide6.QtWidgets import QSizePolicy, QWidget

from imodelexplainer.app.state import ExplainerStore
from imodelexplainer.model.geometry_primitives import Point
from imodelexplainer.model.layout import Positions, connections
from imodelexplainer.model.nodes import NodeId

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------------------
# Palette
# -------------------------------------------------------------------------------

NODE_COLORS: dict[NodeId, str] = {
    NodeId.INTEGRITY: "#818cf8",
    NodeId.INTUITION: "#a78bfa",
    NodeId.INQUIRY: "#c084fc",
    NodeId.INTENTIONALITY: "#e879f9",
}
IDLE_LINE_COLOR = "#475569"
ZONE_COLOR = QColor(99, 102, 241)
TEXT_COLOR = QColor(203, 213, 225)

NODE_DIAMETER = 56.0
HOVER_DIAMETER = 64.0
LEAD_DIAMETER = 72.0


def node_color(node: NodeId, alpha: float = 1.0) -> QColor:
    color = QColor(NODE_COLORS[node])
    color.setAlphaF(max(0.0, min(1.0, alpha)))
    return color


def to_qpoint(point: Point) -> QPointF:
    return QPointF(point.x, point.y)


# -------------------------------------------------------------------------------
# Canvas widget
# -------------------------------------------------------------------------------

class ExplorerCanvas(QWidget):
    """
    Paints the explore zone, the connection lines and the four nodes, and
    forwards mouse input to the store.

    Pointer capture: an accepted press grabs the mouse so moves keep arriving
    outside the widget; release, leave and hide always release it again.
    """
    def __init__(self, store: ExplainerStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self._grabbed = False

        self.setMouseTracking(True)
        self.setMinimumSize(640, 360)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        self.store.session_changed.connect(lambda *_: self.update())

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def node_at(self, point: Point) -> Optional[NodeId]:
        """Top-most node whose hit circle contains the point."""
        positions = self.store.positions()
        radius = self.store.config.node_hit_radius
        for node in reversed(self._paint_order(positions)):
            if positions[node].distance_to(point) <= radius:
                return node
        return None

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event) -> None:
        self.store.set_viewport(self.width(), self.height())
        super().resizeEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        point = self._event_point(event)
        node = self.node_at(point)
        if node is None:
            super().mousePressEvent(event)
            return
        if self.store.pointer_down(node, point):
            self._grab()
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        point = self._event_point(event)
        if self.store.dragging_node() is not None:
            self.store.pointer_move(point)
        else:
            node = self.node_at(point)
            self.store.hover(node)
            self.setCursor(Qt.CursorShape.OpenHandCursor if node is not None else Qt.CursorShape.ArrowCursor)
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self._finish_drag(self._event_point(event))
        event.accept()

    def leaveEvent(self, event) -> None:
        if self.store.dragging_node() is not None and not self._grabbed:
            self._finish_drag(None)
        self.store.hover(None)
        super().leaveEvent(event)

    def hideEvent(self, event) -> None:
        if self.store.dragging_node() is not None:
            self.store.pointer_cancel()
        self._release()
        super().hideEvent(event)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        try:
            self._paint_background(painter)
            positions = self.store.positions()
            self._paint_lock_zone(painter)
            self._paint_reveal_zones(painter)
            self._paint_connections(painter, positions)
            self._paint_nodes(painter, positions)
        finally:
            painter.end()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    # ---- input ----

    @staticmethod
    def _event_point(event: QMouseEvent) -> Point:
        pos = event.position()
        return Point(pos.x(), pos.y())

    def _finish_drag(self, point: Optional[Point]) -> None:
        outcome = self.store.pointer_up(point)
        self._release()
        self.setCursor(Qt.CursorShape.ArrowCursor)
        logger.debug("Pointer released: %s", outcome.name)

    def _grab(self) -> None:
        if not self._grabbed:
            self.grabMouse()
            self._grabbed = True

    def _release(self) -> None:
        if self._grabbed:
            self.releaseMouse()
            self._grabbed = False

    # ---- painting ----

    def _paint_order(self, positions: Positions) -> list[NodeId]:
        """Lead and dragged node last, so they are drawn (and hit) on top."""
        on_top = {self.store.locked_node(), self.store.dragging_node()}
        return sorted(positions, key=lambda n: (n in on_top, n == self.store.dragging_node(), n.index))

    def _paint_background(self, painter: QPainter) -> None:
        gradient = QLinearGradient(0.0, 0.0, 0.0, float(self.height()))
        gradient.setColorAt(0.0, QColor("#0f172a"))
        gradient.setColorAt(1.0, QColor("#1e1b4b"))
        painter.fillRect(self.rect(), QBrush(gradient))

    def _paint_lock_zone(self, painter: QPainter) -> None:
        anchor = to_qpoint(self.store.machine.lock_anchor())
        locked = self.store.locked_node()
        dragging = self.store.dragging_node()
        near = self.store.near_feedback()

        # Outer glow
        accent = locked or dragging
        glow = QRadialGradient(anchor, 80.0)
        if accent is not None and (near or (locked is not None and dragging is None)):
            strength = max(0.2, self.store.machine.glow_intensity()) if dragging is not None else 0.2
            glow.setColorAt(0.0, node_color(accent, strength))
        else:
            color = QColor(ZONE_COLOR)
            color.setAlphaF(0.12)
            glow.setColorAt(0.0, color)
        glow.setColorAt(0.65, QColor(0, 0, 0, 0))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(glow))
        painter.drawEllipse(anchor, 80.0, 80.0)

        if locked is not None:
            return

        ring_color = node_color(dragging) if near and dragging is not None else QColor(99, 102, 241, 77)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        grow = 5.0 if near else 0.0
        painter.setPen(QPen(ring_color, 1.5))
        painter.drawEllipse(anchor, 50.0 + grow, 50.0 + grow)
        painter.setPen(QPen(ring_color, 1.0))
        painter.drawEllipse(anchor, 30.0 + grow, 30.0 + grow)

        font = QFont(self.font())
        font.setPointSizeF(8.0)
        font.setBold(True)
        painter.setFont(font)
        painter.setPen(ring_color if near else QColor(148, 163, 184, 180))
        painter.drawText(QRectF(anchor.x() - 40, anchor.y() - 10, 80, 20), Qt.AlignmentFlag.AlignCenter, "EXPLORE")

    def _paint_reveal_zones(self, painter: QPainter) -> None:
        locked = self.store.locked_node()
        if locked is None or self.store.dragging_node() != locked:
            return
        radius = self.store.config.reveal_radius
        active = self.store.active_reveal_zone()
        for zone, center in self.store.machine.reveal_anchors().items():
            is_active = zone == active
            color = node_color(locked, 0.9 if is_active else 0.35)
            painter.setPen(QPen(color, 2.0 if is_active else 1.0, Qt.PenStyle.SolidLine if is_active else Qt.PenStyle.DashLine))
            painter.setBrush(QBrush(node_color(locked, 0.18)) if is_active else Qt.BrushStyle.NoBrush)
            painter.drawEllipse(to_qpoint(center), radius, radius)

    def _paint_connections(self, painter: QPainter, positions: Positions) -> None:
        dragging = self.store.dragging_node()
        locked = self.store.locked_node()
        for a, b in connections():
            if dragging is not None and dragging in (a, b):
                color, width, alpha = NODE_COLORS[dragging], 2.0, 0.8
            elif locked is not None and locked in (a, b):
                color, width, alpha = NODE_COLORS[locked], 2.0, 0.8
            else:
                color, width, alpha = IDLE_LINE_COLOR, 1.0, 0.25
            pen_color = QColor(color)
            pen_color.setAlphaF(alpha)
            painter.setPen(QPen(pen_color, width))
            painter.drawLine(to_qpoint(positions[a]), to_qpoint(positions[b]))

    def _paint_nodes(self, painter: QPainter, positions: Positions) -> None:
        locked = self.store.locked_node()
        dragging = self.store.dragging_node()
        hovered = self.store.hovered_node()
        near = self.store.near_feedback()

        base_font = QFont("Georgia")
        label_font = QFont(self.font())
        label_font.setPointSizeF(8.5)

        for node in self._paint_order(positions):
            center = to_qpoint(positions[node])
            is_lead = node == locked
            pulled_out = is_lead and dragging == node and not near

            diameter = LEAD_DIAMETER if is_lead else HOVER_DIAMETER if node == hovered else NODE_DIAMETER
            if pulled_out:
                diameter *= 0.9
            r = diameter / 2.0

            halo = QRadialGradient(center, r * 1.8)
            halo.setColorAt(0.0, node_color(node, 0.45 if is_lead else 0.3))
            halo.setColorAt(1.0, QColor(0, 0, 0, 0))
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(halo))
            painter.drawEllipse(center, r * 1.8, r * 1.8)

            painter.setBrush(QBrush(node_color(node, 0.6 if pulled_out else 1.0)))
            painter.drawEllipse(center, r, r)

            base_font.setPointSizeF(18.0 if is_lead else 14.0)
            base_font.setBold(True)
            painter.setFont(base_font)
            painter.setPen(QColor("white"))
            painter.drawText(QRectF(center.x() - r, center.y() - r, diameter, diameter), Qt.AlignmentFlag.AlignCenter, "I")

            if is_lead and dragging == node:
                continue
            painter.setFont(label_font)
            emphasized = is_lead or node == hovered
            painter.setPen(node_color(node) if emphasized else TEXT_COLOR)
            painter.drawText(
                QRectF(center.x() - 70, center.y() + r + 4, 140, 18),
                Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
                node.label,
            )
