"""
Logging setup for the Quote API.

Handlers installed by ``setup_logging`` format records with
``RedactingFormatter``.  Modules log identifiers, counts and statuses
only, but exception text can still carry record contents: pydantic
renders the offending value of every error as ``input_value=...``.  The
formatter blanks those values in messages and tracebacks before
anything is written to the console or the log file.
"""

import logging
import re
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
REDACTED = "<redacted>"

# pydantic: "... [type=missing, input_value={'yearType': 'CE'}, input_type=dict]"
_INPUT_VALUE = re.compile(r"input_value=.*?(?=, input_type=)", re.DOTALL)


def redact(text: str) -> str:
    return _INPUT_VALUE.sub(f"input_value={REDACTED}", text)


class RedactingFormatter(logging.Formatter):
    """Formatter that removes submitted or stored values from output."""

    def __init__(self, fmt: str = LOG_FORMAT, datefmt: str = DATE_FORMAT):
        super().__init__(fmt=fmt, datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        return redact(super().format(record))

    def formatException(self, ei) -> str:
        return redact(super().formatException(ei))


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach redacting handlers to the root logger.

    Calling it again (one call per ``create_app``) only updates the
    level.  Handlers that other code put on the root logger, such as
    pytest's capture handler, are left alone.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if any(isinstance(h.formatter, RedactingFormatter) for h in root.handlers):
        return

    formatter = RedactingFormatter()
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
