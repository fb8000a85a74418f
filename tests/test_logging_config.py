"""Tests for logging setup helpers."""

import logging
import uuid

import pytest

from common.logging_config import get_logger, set_run_id, setup_logging


@pytest.fixture
def component_name():
    name = f"tests.logging.{uuid.uuid4().hex}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def test_setup_logging_configures_handler(component_name):
    logger = setup_logging(component_name, log_level="debug")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_setup_logging_is_idempotent(component_name):
    setup_logging(component_name, log_level="INFO")
    logger = setup_logging(component_name, log_level="WARNING")

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.handlers[0].level == logging.WARNING


def test_setup_logging_reads_env(component_name, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    assert setup_logging(component_name).level == logging.ERROR


def test_unknown_level_falls_back_to_info(component_name):
    assert setup_logging(component_name, log_level="LOUD").level == logging.INFO


def test_run_id_in_format(component_name):
    logger = setup_logging(component_name, run_id="run-42")

    assert "[run-42]" in logger.handlers[0].formatter._fmt


def test_set_run_id(component_name):
    logger = setup_logging(component_name)
    set_run_id(logger, "split-7")

    assert "[split-7]" in logger.handlers[0].formatter._fmt


def test_get_logger_returns_named_logger():
    assert get_logger("splitter.file_splitter").name == "splitter.file_splitter"
