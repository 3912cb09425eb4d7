"""
Calculator Controller
=====================
Owns the running ``CalculatorState`` and is the single entry point the view
calls on every button press or key shortcut.

Why is this file needed?
------------------------
1. Ownership: The evaluator is stateless; this object keeps the current state
   for the lifetime of the window.
2. Signals: The view does not poll. It listens to ``display_changed``.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from desktopcalc.model.evaluator import press
from desktopcalc.model.state import CalculatorState

logger = logging.getLogger(__name__)


class CalculatorController(QObject):
    """Routes button labels through the evaluator and publishes the display text."""
    display_changed = Signal(str)

    def __init__(self, state: Optional[CalculatorState] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._state: CalculatorState = state or CalculatorState()

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def display(self) -> str:
        return self._state.display

    def on_button_pressed(self, label: str) -> str:
        """Apply a button press and return the text to display."""
        before = self._state
        self._state = press(before, label)
        logger.debug(f"'{label}': '{before.display}' -> '{self._state.display}'")

        self.display_changed.emit(self._state.display)
        return self._state.display
