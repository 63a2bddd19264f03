"""Tests for core.logging module."""

import logging
from unittest.mock import patch

import structlog

from core import logging as core_logging


def test_get_module_logger_binds_module_name():
    with patch.object(core_logging, "logger") as mock_logger:
        core_logging.get_module_logger("polyglot.store")

    mock_logger.bind.assert_called_once_with(
        component="store",
        module_path="polyglot.store",
    )


def test_get_module_logger_top_level_module():
    with patch.object(core_logging, "logger") as mock_logger:
        core_logging.get_module_logger("engine")

    mock_logger.bind.assert_called_once_with(component="engine", module_path="engine")


def test_configure_logging_in_tests_is_silent():
    logger = core_logging.configure_logging()
    assert logger is not None
    assert structlog.is_configured()
    assert logging.root.level == core_logging.SILENT


def test_configure_logging_outside_tests_uses_renderer():
    with patch.object(core_logging, "_is_test_environment", return_value=False):
        with patch.object(core_logging.structlog, "configure") as mock_configure:
            with patch.object(core_logging.logging, "basicConfig") as mock_basic:
                core_logging.configure_logging(log_level="DEBUG", is_production=True)

    processors = mock_configure.call_args.kwargs["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    assert mock_basic.call_args.kwargs["level"] == logging.DEBUG


def test_configure_logging_development_uses_console_renderer():
    with patch.object(core_logging, "_is_test_environment", return_value=False):
        with patch.object(core_logging.structlog, "configure") as mock_configure:
            with patch.object(core_logging.logging, "basicConfig"):
                core_logging.configure_logging(is_production=False)

    processors = mock_configure.call_args.kwargs["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


def test_configure_logging_unknown_level_defaults_to_info():
    with patch.object(core_logging, "_is_test_environment", return_value=False):
        with patch.object(core_logging.structlog, "configure"):
            with patch.object(core_logging.logging, "basicConfig") as mock_basic:
                core_logging.configure_logging(log_level="chatty", is_production=False)

    assert mock_basic.call_args.kwargs["level"] == logging.INFO
