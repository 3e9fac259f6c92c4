"""
Field types shared by the record schemas.

Every text field of a record is trimmed and must not be empty after
trimming.  Integers are coerced from numeric strings (``"180"``) but
fractional numbers and booleans are rejected.
"""

from typing import Annotated, Any

from pydantic import HttpUrl, StringConstraints, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

_URL_ADAPTER = TypeAdapter(HttpUrl)

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def reject_bool(value: Any) -> Any:
    # bool is a subclass of int and would otherwise pass as 0 or 1.
    if isinstance(value, bool):
        raise ValueError("Input should be a valid integer")
    return value


def strip_text(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def check_http_url(value: str) -> str:
    """Validate ``value`` as an http or https URL and return it unchanged.

    Other schemes (``javascript:``, ``data:``, ``file:``) are rejected.
    ``HttpUrl`` normalises what it parses (for example by appending a
    trailing slash), so only the validation result is used and the
    client's spelling is what gets stored.
    """
    try:
        _URL_ADAPTER.validate_python(value)
    except PydanticValidationError as exc:
        raise ValueError("Input should be a valid http or https URL") from exc
    return value
