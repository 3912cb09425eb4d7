from desktopcalc.controller.calculator import CalculatorController
from desktopcalc.model.state import CalculatorState, Operation


def test_on_button_pressed_returns_display(qapp):
    controller = CalculatorController()
    assert controller.on_button_pressed("5") == "5"
    assert controller.on_button_pressed("+") == ""
    assert controller.on_button_pressed("3") == "3"
    assert controller.on_button_pressed("🟰") == "8"
    assert controller.display == "8"


def test_display_changed_emitted_on_every_press(qapp):
    controller = CalculatorController()
    emitted = []
    controller.display_changed.connect(emitted.append)

    for label in ("1", "2", "⬅", "⬅", "⬅"):
        controller.on_button_pressed(label)

    assert emitted == ["1", "12", "1", "", ""]


def test_controller_keeps_state_between_presses(qapp):
    controller = CalculatorController(CalculatorState(buffer="4"))
    controller.on_button_pressed("×")
    assert controller.state.first_operand == 4.0
    assert controller.state.pending_operation is Operation.MUL

    controller.on_button_pressed("C")
    assert controller.state == CalculatorState()


def test_division_by_zero_is_displayed(qapp):
    controller = CalculatorController()
    for label in ("5", "÷", "0"):
        controller.on_button_pressed(label)
    assert controller.on_button_pressed("🟰") == "Infinity"
