import pytest

from desktopcalc.model.actions import ALIASES, Action, resolve_label
from desktopcalc.model.state import Operation
from desktopcalc.view.keypad import BUTTON_ROWS, KEY_BINDINGS, ButtonRole, role_for


@pytest.mark.parametrize(
    "label,expected",
    [
        ("7", (Action.DIGIT, "7")),
        ("0", (Action.DIGIT, "0")),
        ("•", (Action.DECIMAL_POINT, None)),
        (".", (Action.DECIMAL_POINT, None)),
        ("C", (Action.CLEAR_ALL, None)),
        ("CE", (Action.CLEAR_ENTRY, None)),
        ("⬅", (Action.BACKSPACE, None)),
        ("±", (Action.NEGATE, None)),
        ("x²", (Action.SQUARE, None)),
        ("√", (Action.SQRT, None)),
        ("¹/ₓ", (Action.RECIPROCAL, None)),
        ("÷", (Action.SET_OPERATION, Operation.DIV)),
        ("/", (Action.SET_OPERATION, Operation.DIV)),
        ("×", (Action.SET_OPERATION, Operation.MUL)),
        ("*", (Action.SET_OPERATION, Operation.MUL)),
        ("−", (Action.SET_OPERATION, Operation.SUB)),
        ("-", (Action.SET_OPERATION, Operation.SUB)),
        ("+", (Action.SET_OPERATION, Operation.ADD)),
        ("%", (Action.SET_OPERATION, Operation.MOD)),
        ("🟰", (Action.EQUALS, None)),
        ("=", (Action.EQUALS, None)),
    ],
)
def test_resolve_label(label, expected):
    assert resolve_label(label) == expected


@pytest.mark.parametrize("label", ["", "12", "sin", "²"])
def test_resolve_unknown_label(label):
    assert resolve_label(label) is None


def test_every_keypad_button_has_an_action():
    labels = [label for row in BUTTON_ROWS for label in row]
    assert len(labels) == 24
    assert all(resolve_label(label) is not None for label in labels)


def test_every_key_binding_targets_a_keypad_button():
    keypad = {label for row in BUTTON_ROWS for label in row}
    assert set(KEY_BINDINGS.values()) <= keypad


def test_button_roles():
    assert role_for("5") is ButtonRole.DIGIT
    assert role_for("🟰") is ButtonRole.EQUALS
    assert role_for("C") is ButtonRole.CLEAR_ALL
    assert role_for("CE") is ButtonRole.FUNCTION
    assert role_for("x²") is ButtonRole.FUNCTION


def test_every_ascii_alias_is_bound_to_a_key():
    assert set(ALIASES) <= set(KEY_BINDINGS)
    assert resolve_label(KEY_BINDINGS["x"]) == resolve_label("x")
