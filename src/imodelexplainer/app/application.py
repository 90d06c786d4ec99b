from __future__ import annotations

import logging
import os
import sys
from dataclasses import fields
from typing import Any

from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

from imodelexplainer.config import DEFAULT_CONFIG, LayoutConfig

logger = logging.getLogger(__name__)

ORG_ID = "imodel"
APP_ID = "imodel-explainer"
ORG_DOMAIN = "imodel.example"

VISIBLE_APP_NAME = "I-Model Explainer"

SETTINGS_GROUP = "layout"


def load_layout_config(settings: QSettings | None = None, base: LayoutConfig = DEFAULT_CONFIG) -> LayoutConfig:
    """
    Read layout overrides from the `layout/` group of the application settings.

    Keys are LayoutConfig field names. Values that cannot be converted, or an
    override set that breaks the threshold ordering, are logged and the base
    configuration is returned unchanged.
    """
    settings = settings if settings is not None else QSettings()
    overrides: dict[str, Any] = {}

    settings.beginGroup(SETTINGS_GROUP)
    try:
        for f in fields(base):
            if not settings.contains(f.name):
                continue
            value_type = bool if isinstance(getattr(base, f.name), bool) else float
            raw = settings.value(f.name)
            try:
                overrides[f.name] = _coerce(raw, value_type)
            except (TypeError, ValueError):
                logger.warning("Ignoring layout setting %s=%r (expected %s).", f.name, raw, value_type.__name__)
    finally:
        settings.endGroup()

    if not overrides:
        return base
    try:
        config = base.with_overrides(overrides)
    except ValueError as e:
        logger.warning("Layout settings rejected, using defaults: %s", e)
        return base
    logger.info("Loaded %d layout override(s) from settings.", len(overrides))
    return config


def _coerce(raw: Any, value_type: type) -> Any:
    if value_type is bool:
        if isinstance(raw, str):
            lowered = raw.strip().lower()
            if lowered in ("1", "true", "yes", "on"):
                return True
            if lowered in ("0", "false", "no", "off"):
                return False
            raise ValueError(raw)
        return bool(raw)
    return float(raw)


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app
