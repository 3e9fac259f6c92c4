import logging
import sys

import pytest
from pydantic import ValidationError as PydanticValidationError

from quote_api.app.core.logging_config import RedactingFormatter, redact, setup_logging
from quote_api.app.schemas.quote import QuoteCreate


def make_record(msg, args=(), exc_info=None):
    return logging.LogRecord("quote_api.test", logging.ERROR, __file__, 1, msg, args, exc_info)


def test_redact_removes_pydantic_input_values():
    text = "year.yearNum\n  Field required [type=missing, input_value={'yearType': 'CE'}, input_type=dict]"
    assert redact(text) == (
        "year.yearNum\n  Field required [type=missing, input_value=<redacted>, input_type=dict]"
    )


def test_redact_leaves_plain_messages_alone():
    assert redact("Created Quote 65f0c0ffee in quotes") == "Created Quote 65f0c0ffee in quotes"


def test_formatter_redacts_tracebacks():
    try:
        QuoteCreate.model_validate({"author": "Kant", "quote": "TOP SECRET TEXT", "language": 42})
    except PydanticValidationError:
        record = make_record("Unhandled error on %s %s", ("GET", "/api/v1/quotes/"), sys.exc_info())

    output = RedactingFormatter().format(record)
    assert "Unhandled error on GET /api/v1/quotes/" in output
    assert "Traceback" in output
    assert "input_value=<redacted>" in output
    assert "input_value=42" not in output


def test_formatter_redacts_interpolated_messages():
    record = make_record("failed: %s", ("[type=string_type, input_value='TOP SECRET TEXT', input_type=str]",))
    assert "TOP SECRET TEXT" not in RedactingFormatter().format(record)


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in before:
            handler.close()
    root.handlers[:] = before
    root.setLevel(level)


def redacting_handlers(root):
    return [h for h in root.handlers if isinstance(h.formatter, RedactingFormatter)]


def test_setup_logging_installs_redacting_handlers_once(root_logger, tmp_path):
    for handler in redacting_handlers(root_logger):
        root_logger.removeHandler(handler)
    logfile = tmp_path / "api.log"

    setup_logging("debug", str(logfile))
    setup_logging("warning", str(logfile))

    handlers = redacting_handlers(root_logger)
    assert len(handlers) == 2
    assert any(isinstance(h, logging.FileHandler) for h in handlers)
    assert root_logger.level == logging.WARNING
