"""Tests for logging setup."""

import logging

import pytest
import structlog

from py_terra.config import Settings
from py_terra.core import generate
from py_terra.utils.logging import configure_logging


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.mark.parametrize("log_format", ["json", "console"])
def test_configure_logging(reset_structlog, log_format):
    configure_logging(Settings(_env_file=None, log_level="DEBUG", log_format=log_format))

    assert logging.getLogger().level == logging.DEBUG
    assert structlog.is_configured()
    structlog.get_logger("py_terra.test").info("configured", log_format=log_format)


def test_generation_logs_phases(reset_structlog, caplog):
    configure_logging(Settings(_env_file=None, log_level="INFO", log_format="json"))

    with caplog.at_level(logging.INFO):
        generate({"height": 30, "width": 30}, seed="logged")

    messages = " ".join(record.getMessage() for record in caplog.records)
    assert "Seeded world" in messages
    assert "World generated" in messages
