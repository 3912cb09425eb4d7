"""
Evaluator
=========
State transitions of the calculator, one function per button.

Every function takes the current ``CalculatorState`` and returns the updated
one. Unparseable input and invalid unary operations (square root of a
negative number, reciprocal of zero) leave the state unchanged; nothing is
raised to the caller. Arithmetic follows IEEE-754 float64, so division by
zero produces ``Infinity`` or ``NaN`` rather than an error.
"""
from __future__ import annotations

from dataclasses import replace
from decimal import Decimal, ROUND_HALF_UP
import logging
import math
from typing import Callable, Dict, Optional

import numpy as np

from desktopcalc.model.actions import Action, ActionArg, resolve_label
from desktopcalc.model.state import CalculatorState, Operation

logger = logging.getLogger(__name__)

_TWO_PLACES = Decimal("0.01")
_ENTRY_CHARS = frozenset("-0123456789.")

_BINARY_UFUNCS: Dict[Operation, np.ufunc] = {
    Operation.ADD: np.add,
    Operation.SUB: np.subtract,
    Operation.MUL: np.multiply,
    Operation.DIV: np.divide,
    # Truncated remainder, sign follows the dividend
    Operation.MOD: np.fmod,
}


# -------------------------------------------------------------------------------
# Number helpers
# -------------------------------------------------------------------------------

def parse_number(text: str) -> Optional[float]:
    """Parse the buffer as float64; None if it is not a number."""
    try:
        return float(text)
    except ValueError:
        return None


def format_number(value: float) -> str:
    """
    Render a result for the display.

    Whole finite values get no decimal places; anything else is rounded
    half-up to two places with trailing zeros and a dangling point removed.

    Examples:
        >>> format_number(3.0)
        '3'
        >>> format_number(3.14159)
        '3.14'
        >>> format_number(float("inf"))
        'Infinity'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    # repr() gives the shortest decimal that round-trips, so 2.675 rounds to 2.68
    exact = Decimal(repr(value))
    if value == math.floor(value):
        return format(exact, ".0f")

    rounded = exact.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    return format(rounded, "f").rstrip("0").rstrip(".")


def apply_operation(operation: Operation, first: float, second: float) -> float:
    """Apply a binary operation with float64 semantics (no ZeroDivisionError)."""
    ufunc = _BINARY_UFUNCS[operation]
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(ufunc(np.float64(first), np.float64(second)))


def _is_entry(buffer: str) -> bool:
    """True if the buffer is user-typed input rather than a non-finite result."""
    return all(ch in _ENTRY_CHARS for ch in buffer)


# -------------------------------------------------------------------------------
# Buffer editing
# -------------------------------------------------------------------------------

def digit(state: CalculatorState, char: str) -> CalculatorState:
    """Append a digit or decimal point; a second decimal point is rejected."""
    buffer = state.buffer if _is_entry(state.buffer) else ""
    if char == "." and "." in buffer:
        return state
    return replace(state, buffer=buffer + char)


def clear_all(state: CalculatorState) -> CalculatorState:
    return CalculatorState()


def clear_entry(state: CalculatorState) -> CalculatorState:
    return replace(state, buffer="")


def backspace(state: CalculatorState) -> CalculatorState:
    if not state.buffer:
        return state
    return replace(state, buffer=state.buffer[:-1])


# -------------------------------------------------------------------------------
# Unary operations
# -------------------------------------------------------------------------------

def _unary(
    state: CalculatorState,
    fn: Callable[[np.float64], np.float64],
    name: str,
    allowed: Callable[[float], bool] = lambda _: True,
) -> CalculatorState:
    value = parse_number(state.buffer)
    if value is None:
        logger.debug(f"{name}: buffer '{state.buffer}' is not a number, ignored")
        return state
    if not allowed(value):
        logger.debug(f"{name}: not defined for {value}, ignored")
        return state
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        result = float(fn(np.float64(value)))
    return replace(state, buffer=format_number(result))


def negate(state: CalculatorState) -> CalculatorState:
    return _unary(state, np.negative, "negate")


def square(state: CalculatorState) -> CalculatorState:
    return _unary(state, np.square, "square")


def sqrt(state: CalculatorState) -> CalculatorState:
    # NaN fails the comparison as well
    return _unary(state, np.sqrt, "sqrt", allowed=lambda v: v >= 0)


def reciprocal(state: CalculatorState) -> CalculatorState:
    return _unary(state, np.reciprocal, "reciprocal", allowed=lambda v: v != 0)


# -------------------------------------------------------------------------------
# Binary operations
# -------------------------------------------------------------------------------

def set_operation(state: CalculatorState, operation: Operation) -> CalculatorState:
    """Store the buffer as the first operand and wait for the second one."""
    value = parse_number(state.buffer)
    if value is None:
        logger.debug(f"set_operation({operation.name}): buffer '{state.buffer}' is not a number, ignored")
        return state
    return CalculatorState(buffer="", first_operand=value, pending_operation=operation)


def equals(state: CalculatorState) -> CalculatorState:
    """Apply the pending operation to the first operand and the buffer."""
    if state.pending_operation is None:
        logger.debug("equals: no pending operation, ignored")
        return state
    second = parse_number(state.buffer)
    if second is None:
        logger.debug(f"equals: buffer '{state.buffer}' is not a number, ignored")
        return state

    result = apply_operation(state.pending_operation, state.first_operand, second)
    logger.debug(
        f"{state.first_operand} {state.pending_operation.value} {second} = {result}"
    )
    return replace(state, buffer=format_number(result), pending_operation=None)


# -------------------------------------------------------------------------------
# Dispatch
# -------------------------------------------------------------------------------

def dispatch(state: CalculatorState, action: Action, arg: ActionArg = None) -> CalculatorState:
    """Run a single action against the state."""
    if action is Action.DIGIT:
        return digit(state, str(arg))
    if action is Action.DECIMAL_POINT:
        return digit(state, ".")
    if action is Action.CLEAR_ALL:
        return clear_all(state)
    if action is Action.CLEAR_ENTRY:
        return clear_entry(state)
    if action is Action.BACKSPACE:
        return backspace(state)
    if action is Action.NEGATE:
        return negate(state)
    if action is Action.SQUARE:
        return square(state)
    if action is Action.SQRT:
        return sqrt(state)
    if action is Action.RECIPROCAL:
        return reciprocal(state)
    if action is Action.SET_OPERATION:
        if not isinstance(arg, Operation):
            raise ValueError(f"SET_OPERATION requires an Operation, got {arg!r}")
        return set_operation(state, arg)
    if action is Action.EQUALS:
        return equals(state)
    raise ValueError(f"Unknown action: {action}")


def press(state: CalculatorState, label: str) -> CalculatorState:
    """Apply the button with the given label (unknown labels are ignored)."""
    resolved = resolve_label(label)
    if resolved is None:
        logger.debug(f"Unknown button label '{label}', ignored")
        return state
    action, arg = resolved
    return dispatch(state, action, arg)
