"""Tests for the logger setup."""

import logging

from excel_schema_codegen.logger import logger, setup_logger


def test_setup_routes_through_queue_handler():
    setup_logger()

    assert [h.get_name() for h in logger.handlers] == ["queue_handler"]
    assert not logger.propagate


def test_setup_can_run_twice_with_level_override():
    setup_logger()
    setup_logger("debug")

    assert logging.getHandlerByName("stderr").level == logging.DEBUG
    assert len(logger.handlers) == 1
