"""Tests for logging setup"""
import logging
from dataclasses import replace

import pytest

from tienda.logging import (
    HANDLER_NAME,
    LOG_FORMAT,
    LOG_FORMAT_SIMPLE,
    clip_for_log,
    configure_logging,
)


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(handler)
    root.setLevel(level)


def _own_handlers(root):
    return [h for h in root.handlers if h.get_name() == HANDLER_NAME]


def test_configure_uses_settings_level_and_format(root_logger, settings):
    handler = configure_logging(replace(settings, log_level="DEBUG"))

    assert root_logger.level == logging.DEBUG
    assert handler.formatter._fmt == LOG_FORMAT
    assert logging.getLogger("httpx").level == logging.WARNING


def test_production_uses_simple_format(root_logger, settings):
    handler = configure_logging(replace(settings, environment="production"))
    assert handler.formatter._fmt == LOG_FORMAT_SIMPLE


def test_reconfigure_does_not_stack_handlers(root_logger, settings):
    configure_logging(settings)
    configure_logging(replace(settings, log_level="ERROR"))

    assert len(_own_handlers(root_logger)) == 1
    assert root_logger.level == logging.ERROR


def test_unknown_level_falls_back_to_info(root_logger, settings):
    configure_logging(replace(settings, log_level="CHATTY"))
    assert root_logger.level == logging.INFO


def test_clip_for_log_escapes_line_breaks():
    assert clip_for_log("a\nb") == "'a\\nb'"


def test_clip_for_log_truncates():
    clipped = clip_for_log("x" * 500, max_length=10)
    assert clipped == "'xxxxxxxxx..."
    assert len(clipped) == 13
