"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Calculator State (Model) inside its Controller.
2. Instantiates the Main Window (View).
3. Passes the Controller into the View so they can communicate.
4. Prevents circular import errors by being the orchestrator.
"""
import sys

from desktopcalc.app.application import create_app
from desktopcalc.config import LOG_FILE, LOG_LEVEL
from desktopcalc.controller.calculator import CalculatorController
from desktopcalc.logging_config import setup_logging
from desktopcalc.model.state import CalculatorState
from desktopcalc.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    # DESKTOPCALC_LOG_LEVEL=DEBUG shows every button press
    logger = setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Model and its Controller
    controller = CalculatorController(CalculatorState())

    # 4. Initialize the Main Window, passing the controller
    window = MainWindow(controller)
    window.show()
    logger.info("Calculator window shown.")

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
