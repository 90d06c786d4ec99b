from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from imodelexplainer.app.state import ExplainerStore
from imodelexplainer.app.ui.canvas import NODE_COLORS
from imodelexplainer.model.content import ContentLookup
from imodelexplainer.model.nodes import NodeId

HINT_IDLE = "Drag an I to the Explore zone on the left"
HINT_LOCKED = "Hover over the other I's, or drag the lead towards them, to see how they connect"
HINT_RESET = "⟵ Drag the circle OUT to reset"


class DetailPanel(QWidget):
    """Explanation area below the canvas. Reads the store, never writes it."""
    def __init__(self, store: ExplainerStore, content: ContentLookup, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.content = content

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 12, 24, 24)

        self.title_label = QLabel(self)
        self.main_label = QLabel(self)
        self.relation_label = QLabel(self)
        self.hint_label = QLabel(self)
        for label in (self.main_label, self.relation_label, self.hint_label):
            label.setWordWrap(True)
        self.hint_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        layout.addWidget(self.title_label)
        layout.addWidget(self.main_label)
        layout.addWidget(self.relation_label)
        layout.addWidget(self.hint_label)
        layout.addStretch(1)

        self.setMinimumHeight(180)
        self.setStyleSheet("background-color: #0f172a; color: #cbd5e1;")

        store.lock_changed.connect(lambda *_: self.refresh())
        store.reveal_changed.connect(lambda *_: self.refresh())
        store.hover_changed.connect(lambda *_: self.refresh())
        self.refresh()

    def support_node(self) -> Optional[NodeId]:
        """Node whose relation text is shown: the active reveal zone wins over hover."""
        lead = self.store.locked_node()
        if lead is None:
            return None
        zone = self.store.active_reveal_zone()
        if zone is not None:
            return self.content.zone_node(lead, zone)
        return self.store.hovered_node()

    def refresh(self) -> None:
        lead = self.store.locked_node()
        if lead is None:
            self.title_label.clear()
            self.main_label.clear()
            self.relation_label.clear()
            self.hint_label.setText(HINT_IDLE)
            return

        color = NODE_COLORS[lead]
        self.title_label.setText(f"<b style='color:{color}; font-size:14pt'>{self.content.title(lead)}</b>")
        self.main_label.setText(self.content.content(lead))

        zone = self.store.active_reveal_zone()
        support = self.support_node()
        if support is None:
            self.relation_label.setText(f"<i>{HINT_LOCKED}</i>")
        else:
            text = self.content.content(lead, zone) if zone is not None else self.content.relation(lead, support)
            self.relation_label.setText(
                f"<b style='color:{NODE_COLORS[support]}'>{self.content.title(support)}:</b> {text}"
            )
        self.hint_label.setText(HINT_RESET)
