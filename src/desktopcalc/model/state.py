"""
Calculator State (Data Model)
=============================
This module defines the data structure for the running calculator.

Why is this file needed?
------------------------
1. State Management: It holds the edited text, the stored first operand and
   the selected operator in one place.
2. Decoupling: The evaluator reads a state and returns a new one; the
   controller owns the current instance and the view only renders its text.

Classes:
    Operation: Binary operators awaiting a second operand.
    CalculatorState: The state container.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


class Operation(StrEnum):
    ADD = "+"
    SUB = "-"
    MUL = "x"
    DIV = "/"
    MOD = "%"


@dataclass(frozen=True)
class CalculatorState:
    """
    Snapshot of the calculator.

    The evaluator never mutates a state; each action returns a new instance
    via ``dataclasses.replace``.
    """
    buffer: str = ""
    first_operand: float = 0.0
    pending_operation: Optional[Operation] = None

    @property
    def display(self) -> str:
        """Text shown in the display field."""
        return self.buffer
