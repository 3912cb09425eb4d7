"""
Main Application Window
=======================
The calculator window: display field on top, keypad grid below, both drawn
over the background panel.

Why is this file needed?
------------------------
1. Layout: It organizes the visual structure of the application.
2. Routing: It connects every button and keyboard shortcut to the
   controller, and the controller's display updates back to the display.
"""
import logging
import os
from typing import Dict, Optional

from PySide6.QtGui import QGuiApplication, QIcon, QKeySequence, QShortcut
from PySide6.QtWidgets import QGridLayout, QMainWindow

from desktopcalc.app.application import VISIBLE_APP_NAME
from desktopcalc.config import BACKGROUND_PATH, ICON_PATH
from desktopcalc.controller.calculator import CalculatorController
from desktopcalc.view.keypad import BUTTON_ROWS, BUTTON_STYLES, KEY_BINDINGS, role_for
from desktopcalc.view.widgets.background import BackgroundPanel
from desktopcalc.view.widgets.rounded import RoundedButton, RoundedDisplay

logger = logging.getLogger(__name__)

N_COLUMNS = 4


class MainWindow(QMainWindow):
    def __init__(
        self,
        controller: CalculatorController,
        icon_path: Optional[str] = ICON_PATH,
        background_path: Optional[str] = BACKGROUND_PATH,
    ) -> None:
        super().__init__()
        self.controller: CalculatorController = controller
        self.buttons: Dict[str, RoundedButton] = {}

        self.setWindowTitle(VISIBLE_APP_NAME)
        self._set_icon(icon_path)
        self.setMinimumSize(300, 400)

        # --- MAIN CONTAINER ---
        self.background = BackgroundPanel(background_path)
        self.setCentralWidget(self.background)

        grid = QGridLayout(self.background)
        grid.setContentsMargins(10, 10, 10, 10)
        grid.setSpacing(4)

        # --- 1. DISPLAY (row 0, full width) ---
        self.display = RoundedDisplay()
        self.display.setText(self.controller.display)
        grid.addWidget(self.display, 0, 0, 1, N_COLUMNS)
        grid.setRowStretch(0, 20)

        # --- 2. KEYPAD (rows 1..6) ---
        for row, labels in enumerate(BUTTON_ROWS, start=1):
            for col, label in enumerate(labels):
                button = RoundedButton(label, BUTTON_STYLES[role_for(label)])
                button.clicked.connect(lambda _=False, text=label: self.controller.on_button_pressed(text))
                grid.addWidget(button, row, col)
                self.buttons[label] = button
            grid.setRowStretch(row, 16)

        for col in range(N_COLUMNS):
            grid.setColumnStretch(col, 1)

        # --- SIGNAL CONNECTIONS ---
        self.controller.display_changed.connect(self.display.setText)
        self._create_shortcuts()

        self.resize(400, 600)
        self._center_on_screen()

    def _create_shortcuts(self) -> None:
        self.shortcuts = []
        for key, label in KEY_BINDINGS.items():
            shortcut = QShortcut(QKeySequence(key), self)
            shortcut.activated.connect(lambda text=label: self.controller.on_button_pressed(text))
            self.shortcuts.append(shortcut)

    def _set_icon(self, icon_path: Optional[str]) -> None:
        if not icon_path or not os.path.exists(icon_path):
            logger.warning(f"Window icon not found at {icon_path}")
            return
        self.setWindowIcon(QIcon(icon_path))

    def _center_on_screen(self) -> None:
        screen = QGuiApplication.primaryScreen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

    def button(self, label: str) -> RoundedButton:
        """Keypad button by its label."""
        return self.buttons[label]
