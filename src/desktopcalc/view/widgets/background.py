"""
Background Panel
Container that draws an image behind its children, scaled to fit while
keeping the aspect ratio, and centred.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPainter, QPalette, QPixmap
from PySide6.QtWidgets import QWidget

logger = logging.getLogger(__name__)

FALLBACK_COLOR = QColor(220, 220, 220)


class BackgroundPanel(QWidget):
    def __init__(self, image_path: Optional[str] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._pixmap: Optional[QPixmap] = None
        self.set_image(image_path)

    @property
    def has_image(self) -> bool:
        return self._pixmap is not None

    def set_image(self, image_path: Optional[str]) -> bool:
        """
        Load the background image. On failure the panel is filled with a
        plain colour instead.

        Returns:
            True if the image was loaded.
        """
        pixmap = QPixmap(image_path) if image_path else QPixmap()
        if pixmap.isNull():
            logger.warning(f"Could not load background image '{image_path}', using plain background")
            self._pixmap = None
            self._use_fallback_color()
            self.update()
            return False

        self._pixmap = pixmap
        self.setAutoFillBackground(False)
        self.update()
        return True

    def _use_fallback_color(self) -> None:
        palette = self.palette()
        palette.setColor(QPalette.Window, FALLBACK_COLOR)
        self.setPalette(palette)
        self.setAutoFillBackground(True)

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        if self._pixmap is None or self.width() <= 0 or self.height() <= 0:
            return

        scaled = self._pixmap.scaled(self.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation)
        x = (self.width() - scaled.width()) // 2
        y = (self.height() - scaled.height()) // 2

        painter = QPainter(self)
        painter.setRenderHint(QPainter.SmoothPixmapTransform)
        painter.drawPixmap(x, y, scaled)
        painter.end()
