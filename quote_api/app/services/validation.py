"""
Record validation.

``validate`` is the single entry point used to check an incoming
payload against the schema of a record type.  It runs in one of two
modes:

* without identifier (creation) — any client supplied ``id``/``_id``
  is discarded because the store assigns identifiers;
* with identifier (replacement and response echoing) — ``id`` is
  required.

Pydantic errors are converted to the domain ``ValidationError`` which
lists every offending field.  Error messages never include the
submitted values.
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from quote_api.app.core.exceptions import ValidationError
from quote_api.app.schemas.faq import FAQCreate, FAQRead
from quote_api.app.schemas.quote import QuoteCreate, QuoteRead


class RecordType(str, Enum):
    QUOTE = "Quote"
    FAQ = "FAQ"

    @property
    def collection_name(self) -> str:
        return _COLLECTIONS[self]

    @property
    def create_model(self) -> Type[BaseModel]:
        return _SCHEMAS[self][0]

    @property
    def read_model(self) -> Type[BaseModel]:
        return _SCHEMAS[self][1]


_COLLECTIONS: Dict[RecordType, str] = {
    RecordType.QUOTE: "quotes",
    RecordType.FAQ: "faqs",
}

_SCHEMAS: Dict[RecordType, Tuple[Type[BaseModel], Type[BaseModel]]] = {
    RecordType.QUOTE: (QuoteCreate, QuoteRead),
    RecordType.FAQ: (FAQCreate, FAQRead),
}


def _field_errors(exc: PydanticValidationError) -> List[Dict[str, str]]:
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "body"
        errors.append({"field": field, "message": error["msg"]})
    return errors


def validate(payload: Any, record_type: RecordType, with_identifier: bool = False) -> BaseModel:
    """Validate ``payload`` as a record of ``record_type``.

    Returns the normalised record (strings trimmed, integers coerced).
    Raises ``ValidationError`` describing every violated constraint.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError(
            f"{record_type.value} payload must be a JSON object",
            [{"field": "body", "message": "Input should be an object"}],
        )

    data = dict(payload)
    if with_identifier:
        # Documents read back from MongoDB carry ``_id`` rather than ``id``.
        if "id" not in data and "_id" in data:
            data["id"] = data.pop("_id")
        data.pop("_id", None)
        if data.get("id") is not None and not isinstance(data["id"], str):
            data["id"] = str(data["id"])
        model = record_type.read_model
    else:
        data.pop("id", None)
        data.pop("_id", None)
        model = record_type.create_model

    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        errors = _field_errors(exc)
        summary = "; ".join(f"{item['field']}: {item['message']}" for item in errors)
        raise ValidationError(f"Invalid {record_type.value}: {summary}", errors) from exc


def to_document(record: BaseModel) -> Dict[str, Any]:
    """Convert a validated record into the document stored in the database.

    The identifier is excluded (the store owns ``_id``) and absent
    optional fields are left out rather than stored as ``null``.
    """
    return record.model_dump(exclude={"id"}, exclude_none=True)
