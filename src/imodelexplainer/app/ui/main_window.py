"""
Main window: the explore canvas on top, the detail panel below.
"""
from __future__ import annotations

import logging

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QToolBar, QVBoxLayout, QWidget

from imodelexplainer.app.application import VISIBLE_APP_NAME
from imodelexplainer.app.state import ExplainerStore
from imodelexplainer.app.ui.canvas import ExplorerCanvas
from imodelexplainer.app.ui.detail_panel import DetailPanel
from imodelexplainer.config import DEFAULT_CONFIG, LayoutConfig
from imodelexplainer.model.content import ContentLookup

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, config: LayoutConfig = DEFAULT_CONFIG, content: ContentLookup | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1100, 720)

        # One store per window; windows never share session state
        self.store = ExplainerStore(config, parent=self)
        self.content = content if content is not None else ContentLookup()

        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        v.setSpacing(0)

        self.canvas = ExplorerCanvas(self.store, central)
        self.detail_panel = DetailPanel(self.store, self.content, central)
        v.addWidget(self.canvas, 1)
        v.addWidget(self.detail_panel, 0)
        self.setCentralWidget(central)

        toolbar = QToolBar(self)
        toolbar.setMovable(False)
        self.addToolBar(toolbar)
        self.reset_action = QAction(self.tr("Reset"), self)
        self.reset_action.triggered.connect(self._on_reset)
        toolbar.addAction(self.reset_action)

        self.store.lock_changed.connect(self._on_lock_changed)

    def _on_reset(self) -> None:
        logger.info("Reset requested from the toolbar.")
        self.store.reset()

    def _on_lock_changed(self, lead) -> None:
        if lead is None:
            self.statusBar().clearMessage()
        else:
            self.statusBar().showMessage(self.tr("Exploring {0}").format(lead.label))
