"""
Keypad Layout
=============
Which buttons exist, where they sit, how they are coloured, and which keys
on the keyboard trigger them.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from PySide6.QtGui import QColor

from desktopcalc.model import actions as a


class ButtonRole(Enum):
    DIGIT = "digit"
    EQUALS = "equals"
    CLEAR_ALL = "clear_all"
    FUNCTION = "function"


@dataclass(frozen=True)
class ButtonStyle:
    background: QColor
    foreground: QColor
    hover: QColor


BUTTON_ROWS: List[List[str]] = [
    [a.LABEL_MOD, a.LABEL_CLEAR_ENTRY, a.LABEL_CLEAR_ALL, a.LABEL_BACKSPACE],
    [a.LABEL_RECIPROCAL, a.LABEL_SQUARE, a.LABEL_SQRT, a.LABEL_DIV],
    ["7", "8", "9", a.LABEL_MUL],
    ["4", "5", "6", a.LABEL_SUB],
    ["1", "2", "3", a.LABEL_ADD],
    [a.LABEL_NEGATE, "0", a.LABEL_DECIMAL_POINT, a.LABEL_EQUALS],
]

TEXT_COLOR = QColor(50, 50, 50)
WHITE = QColor(255, 255, 255)

BUTTON_STYLES: Dict[ButtonRole, ButtonStyle] = {
    ButtonRole.DIGIT: ButtonStyle(WHITE, TEXT_COLOR, QColor(200, 200, 200)),
    ButtonRole.EQUALS: ButtonStyle(QColor(0, 120, 215), WHITE, QColor(0, 120, 215).lighter(120)),
    ButtonRole.CLEAR_ALL: ButtonStyle(QColor(255, 100, 100), WHITE, QColor(255, 100, 100).lighter(115)),
    ButtonRole.FUNCTION: ButtonStyle(QColor(230, 230, 230), TEXT_COLOR, QColor(245, 245, 245)),
}

# QKeySequence text -> keypad label
KEY_BINDINGS: Dict[str, str] = {
    **{str(d): str(d) for d in range(10)},
    ".": a.LABEL_DECIMAL_POINT,
    ",": a.LABEL_DECIMAL_POINT,
    "+": a.LABEL_ADD,
    "-": a.LABEL_SUB,
    "*": a.LABEL_MUL,
    "x": a.LABEL_MUL,
    "/": a.LABEL_DIV,
    "%": a.LABEL_MOD,
    "=": a.LABEL_EQUALS,
    "Return": a.LABEL_EQUALS,
    "Enter": a.LABEL_EQUALS,
    "Backspace": a.LABEL_BACKSPACE,
    "Delete": a.LABEL_CLEAR_ENTRY,
    "Escape": a.LABEL_CLEAR_ALL,
}


def role_for(label: str) -> ButtonRole:
    if len(label) == 1 and label.isdecimal():
        return ButtonRole.DIGIT
    if label == a.LABEL_EQUALS:
        return ButtonRole.EQUALS
    if label == a.LABEL_CLEAR_ALL:
        return ButtonRole.CLEAR_ALL
    return ButtonRole.FUNCTION
