import logging
import os

import pytest
from PySide6.QtWidgets import QApplication

from desktopcalc import config
from desktopcalc.app.application import APP_ID, VISIBLE_APP_NAME, create_app
from desktopcalc.logging_config import setup_logging


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, logging.INFO),
        ("", logging.INFO),
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        ("15", 15),
        ("verbose", logging.INFO),
    ],
)
def test_parse_log_level(value, expected):
    assert config.parse_log_level(value) == expected


def test_resource_paths_point_into_assets():
    assert config.ASSETS_PATH == config.get_resource_path("assets")
    assert os.path.dirname(config.ICON_PATH) == config.ASSETS_PATH
    assert os.path.dirname(config.BACKGROUND_PATH) == config.ASSETS_PATH


def test_bundled_assets_exist():
    assert os.path.exists(config.ICON_PATH)
    assert os.path.exists(config.BACKGROUND_PATH)


def test_frozen_resource_path(monkeypatch, tmp_path):
    monkeypatch.setattr(config.sys, "_MEIPASS", str(tmp_path), raising=False)
    assert config.get_resource_path("assets") == os.path.join(str(tmp_path), "assets")


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "calc.log"
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))
    try:
        assert logger.name == "desktopcalc"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        logging.getLogger("desktopcalc.model.evaluator").debug("pressed 5")
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "desktopcalc.model.evaluator - DEBUG - pressed 5" in text
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    setup_logging()
    logger = setup_logging()
    try:
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()


def test_create_app_reuses_running_instance(qapp):
    app = create_app()
    assert isinstance(app, QApplication)
    assert app.applicationName() == APP_ID
    assert app.applicationDisplayName() == VISIBLE_APP_NAME
