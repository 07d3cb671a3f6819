import logging

import pytest

from imagemanip.log import get_logger


def test_single_handler_across_calls():
    logger = get_logger()
    get_logger("debug")
    assert logger is logging.getLogger("imagemanip")
    assert len(logger.handlers) == 1


def test_level_names_and_constants():
    assert get_logger("debug").level == logging.DEBUG
    assert get_logger(logging.WARNING).level == logging.WARNING
    assert get_logger().level == logging.WARNING
    get_logger("INFO")


def test_unknown_level_name():
    with pytest.raises(ValueError):
        get_logger("loud")


def test_module_loggers_propagate_to_package():
    child = logging.getLogger("imagemanip.engine")
    assert child.parent is get_logger()
