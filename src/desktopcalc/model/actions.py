"""
Button Actions
==============
Maps the text printed on a keypad button (or typed on the keyboard) to the
action the evaluator performs.
"""
from __future__ import annotations

from enum import Enum, auto
from typing import Dict, Optional, Tuple

from desktopcalc.model.state import Operation


class Action(Enum):
    DIGIT = auto()
    DECIMAL_POINT = auto()
    CLEAR_ALL = auto()
    CLEAR_ENTRY = auto()
    BACKSPACE = auto()
    NEGATE = auto()
    SQUARE = auto()
    SQRT = auto()
    RECIPROCAL = auto()
    SET_OPERATION = auto()
    EQUALS = auto()


# Argument is the digit character for DIGIT, the Operation for SET_OPERATION
ActionArg = Optional[str | Operation]
ResolvedAction = Tuple[Action, ActionArg]

# Keypad labels
LABEL_CLEAR_ALL = "C"
LABEL_CLEAR_ENTRY = "CE"
LABEL_BACKSPACE = "⬅"
LABEL_RECIPROCAL = "¹/ₓ"
LABEL_SQUARE = "x²"
LABEL_SQRT = "√"
LABEL_NEGATE = "±"
LABEL_DECIMAL_POINT = "•"
LABEL_EQUALS = "🟰"
LABEL_ADD = "+"
LABEL_SUB = "−"
LABEL_MUL = "×"
LABEL_DIV = "÷"
LABEL_MOD = "%"

LABEL_ACTIONS: Dict[str, ResolvedAction] = {
    LABEL_CLEAR_ALL: (Action.CLEAR_ALL, None),
    LABEL_CLEAR_ENTRY: (Action.CLEAR_ENTRY, None),
    LABEL_BACKSPACE: (Action.BACKSPACE, None),
    LABEL_RECIPROCAL: (Action.RECIPROCAL, None),
    LABEL_SQUARE: (Action.SQUARE, None),
    LABEL_SQRT: (Action.SQRT, None),
    LABEL_NEGATE: (Action.NEGATE, None),
    LABEL_DECIMAL_POINT: (Action.DECIMAL_POINT, None),
    LABEL_EQUALS: (Action.EQUALS, None),
    LABEL_ADD: (Action.SET_OPERATION, Operation.ADD),
    LABEL_SUB: (Action.SET_OPERATION, Operation.SUB),
    LABEL_MUL: (Action.SET_OPERATION, Operation.MUL),
    LABEL_DIV: (Action.SET_OPERATION, Operation.DIV),
    LABEL_MOD: (Action.SET_OPERATION, Operation.MOD),
}

# Plain ASCII spellings accepted from the keyboard
ALIASES: Dict[str, str] = {
    ".": LABEL_DECIMAL_POINT,
    ",": LABEL_DECIMAL_POINT,
    "-": LABEL_SUB,
    "*": LABEL_MUL,
    "x": LABEL_MUL,
    "/": LABEL_DIV,
    "=": LABEL_EQUALS,
}


def resolve_label(label: str) -> Optional[ResolvedAction]:
    """Return the (action, argument) pair for a label, or None if unknown."""
    if len(label) == 1 and label in "0123456789":
        return Action.DIGIT, label
    label = ALIASES.get(label, label)
    return LABEL_ACTIONS.get(label)
