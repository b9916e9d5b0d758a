"""Unit tests for structlog configuration."""

import logging

import pytest
import structlog

from adapters.rate_gate import TokenBucketGate
from core.config import AppSettings
from core.domain.time_unit import TimeUnit
from core.logging import configure_from_settings, configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.mark.parametrize("json_output", [False, True])
def test_configure_logging_and_emit(json_output):
    configure_logging("info", json=json_output)

    get_logger("tests.logging").info("crpt.test_event", product_group="milk")

    assert structlog.is_configured()


def test_unknown_level_falls_back_to_info():
    configure_logging("verbose")

    assert structlog.is_configured()


def test_configure_from_settings():
    configure_from_settings(AppSettings(_env_file=None, log_level="debug", log_json=True))

    assert structlog.is_configured()


def test_library_events_stay_off_stdout_until_configured(capsys, fake_clock):
    """Test that an unconfigured host sees no debug/info output from the client."""
    structlog.reset_defaults()
    gate = TokenBucketGate(TimeUnit.SECONDS, 1, clock=fake_clock, sleep=fake_clock.sleep)

    gate.acquire()
    gate.acquire()
    get_logger("tests.library").info("crpt.create_document.request", product_group="milk")

    assert capsys.readouterr().out == ""


def test_get_logger_attaches_a_single_null_handler():
    get_logger("tests.null_handler")
    get_logger("tests.null_handler")

    handlers = logging.getLogger("tests.null_handler").handlers
    assert sum(isinstance(h, logging.NullHandler) for h in handlers) == 1
