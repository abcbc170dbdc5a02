from datetime import timedelta

import pytest

from corekernel.config import Config, Log
from corekernel.errors import ParseError
from corekernel.logger import TRACE, Logger


def _records(caplog):
    return [
        (record.levelname, record.getMessage())
        for record in caplog.records
        if record.name == "corekernel.logger"
    ]


@pytest.fixture
def logger(caplog):
    created = Logger(Config())
    caplog.set_level(TRACE, logger="corekernel.logger")
    return created


def test_create_logs_info(caplog):
    logger = Logger(Config())
    caplog.set_level(TRACE, logger="corekernel.logger")
    logger.info("Test info message")
    assert _records(caplog) == [("INFO", "Test info message")]


def test_methods(logger, caplog):
    logger.info("Test info message")
    logger.warn("Test warning message")
    logger.error("Test error message")
    logger.debug("Test debug message")
    logger.trace("Test trace message")
    assert _records(caplog) == [
        ("INFO", "Test info message"),
        ("WARNING", "Test warning message"),
        ("ERROR", "Test error message"),
        ("DEBUG", "Test debug message"),
        ("TRACE", "Test trace message"),
    ]


def test_context(logger, caplog):
    logger.context("TEST", "Test context message")
    assert _records(caplog) == [("INFO", "[TEST] Test context message")]


def test_performance_timedelta(logger, caplog):
    logger.performance("test_operation", timedelta(milliseconds=100))
    assert _records(caplog) == [("INFO", "PERFORMANCE: test_operation took 100ms")]


def test_performance_seconds(logger, caplog):
    logger.performance("operation", 1.5)
    assert _records(caplog) == [("INFO", "PERFORMANCE: operation took 1.5s")]


def test_info_level_hides_debug(caplog):
    logger = Logger(Config())
    logger.debug("hidden")
    logger.info("shown")
    assert _records(caplog) == [("INFO", "shown")]


def test_unknown_level_raises():
    with pytest.raises(ParseError):
        Logger(Config(log=Log(level="loud")))