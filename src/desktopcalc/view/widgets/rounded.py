"""
Rounded Widgets
Keypad buttons and the display field, painted as rounded rectangles.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QColor, QFont, QPainter, QPen
from PySide6.QtWidgets import QLineEdit, QPushButton, QSizePolicy, QWidget

from desktopcalc.view.keypad import ButtonStyle

CORNER_RADIUS = 10.0
BORDER_COLOR = QColor(100, 100, 100)
DISPLAY_BACKGROUND = QColor(240, 240, 240)
DISPLAY_TEXT = QColor(50, 50, 50)


def _rounded_rect(widget: QWidget, inset: float = 0.5) -> QRectF:
    return QRectF(widget.rect()).adjusted(inset, inset, -inset, -inset)


class RoundedButton(QPushButton):
    """Push button with a rounded body whose colour follows hover/press state."""

    def __init__(self, label: str, style: ButtonStyle, parent: Optional[QWidget] = None) -> None:
        super().__init__(label, parent)
        self.button_style = style

        self.setFont(QFont("Segoe UI Symbol", 24, QFont.Bold))
        self.setFocusPolicy(Qt.NoFocus)
        self.setCursor(Qt.PointingHandCursor)
        self.setAttribute(Qt.WA_Hover, True)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(40, 32)

    def current_color(self) -> QColor:
        """Body colour for the current interaction state."""
        if self.isDown():
            return self.button_style.background.darker(120)
        if self.underMouse():
            return self.button_style.hover
        return self.button_style.background

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        painter.setPen(QPen(BORDER_COLOR, 1))
        painter.setBrush(self.current_color())
        painter.drawRoundedRect(_rounded_rect(self), CORNER_RADIUS, CORNER_RADIUS)

        painter.setPen(self.button_style.foreground)
        painter.setFont(self.font())
        painter.drawText(self.rect(), Qt.AlignCenter, self.text())
        painter.end()


class RoundedDisplay(QLineEdit):
    """Read-only, right-aligned result field on a rounded light background."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setReadOnly(True)
        self.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.setFont(QFont("Arial", 40))
        self.setFocusPolicy(Qt.NoFocus)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        # The rounded body is painted below; Qt only draws the text
        self.setStyleSheet(
            f"QLineEdit {{ background: transparent; border: none; padding: 0 8px; "
            f"color: {DISPLAY_TEXT.name()}; }}"
        )

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setPen(Qt.NoPen)
        painter.setBrush(DISPLAY_BACKGROUND)
        painter.drawRoundedRect(_rounded_rect(self), CORNER_RADIUS, CORNER_RADIUS)
        painter.end()

        super().paintEvent(event)
