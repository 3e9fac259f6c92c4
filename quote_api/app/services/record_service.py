"""
Service layer shared by every record type.

``RecordService`` implements list, get, create, replace and delete on
top of a ``DocumentStore``.  Concrete services only choose the record
type, which determines the collection and the schemas used for
validation.  A service instance is cheap and is built per request
around the store owned by the application.

Replace and delete read the existing record before writing.  The two
steps are not atomic: a concurrent delete between them can make a
replace write nothing, and two concurrent deletes can both pass the
existence check.  Isolation is left to the database.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from bson import ObjectId
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from quote_api.app.core.db import DocumentStore
from quote_api.app.core.exceptions import CorruptRecordError, NotFoundError
from quote_api.app.services.query import resolve_filter
from quote_api.app.services.validation import RecordType, to_document, validate

logger = logging.getLogger(__name__)


class RecordService:
    """CRUD operations for one record type."""

    record_type: RecordType

    def __init__(self, store: DocumentStore):
        self.store = store
        self.collection = store.collection(self.record_type.collection_name)

    def _to_record(self, document: Dict[str, Any]) -> BaseModel:
        """Build the response model for a stored document.

        Keys the read model does not declare (driver bookkeeping such as
        ``__v``, or fields of an older schema) are dropped.  A document
        that still fails validation raises ``CorruptRecordError``, which
        names the offending fields but never their values.
        """
        read_model = self.record_type.read_model
        record_id = str(document["_id"])
        data = {k: v for k, v in document.items() if k in read_model.model_fields}
        data["id"] = record_id
        try:
            return read_model.model_validate(data)
        except PydanticValidationError as exc:
            fields = sorted({".".join(str(part) for part in err["loc"]) for err in exc.errors()})
        raise CorruptRecordError(record_id, fields)

    async def _require(self, record_id: str) -> ObjectId:
        """Return the parsed identifier of an existing record or raise."""
        oid = self.store.parse_id(record_id)
        existing = await self.collection.find_one({"_id": oid})
        if existing is None:
            raise NotFoundError(f"{self.record_type.value} {record_id} not found")
        return oid

    async def list_records(self, params: Mapping[str, Optional[str]]) -> List[BaseModel]:
        """Return every record matching the ``author``/``language`` filter."""
        documents = await self.collection.find(resolve_filter(params))
        logger.debug("Listed %d documents from %s", len(documents), self.collection.name)
        records = []
        for document in documents:
            try:
                records.append(self._to_record(document))
            except CorruptRecordError as exc:
                logger.warning(
                    "Skipping %s %s in %s: invalid fields %s",
                    self.record_type.value,
                    document["_id"],
                    self.collection.name,
                    ", ".join(exc.fields),
                )
        return records

    async def get_record(self, record_id: str) -> BaseModel:
        oid = self.store.parse_id(record_id)
        document = await self.collection.find_one({"_id": oid})
        if document is None:
            raise NotFoundError(f"{self.record_type.value} {record_id} not found")
        return self._to_record(document)

    async def create_record(self, payload: Any) -> BaseModel:
        """Validate ``payload`` and insert it.

        Validation happens before the store is touched, so an invalid
        payload never leaves a partial record behind.
        """
        record = validate(payload, self.record_type)
        inserted = await self.collection.insert(to_document(record))
        logger.info("Created %s %s", self.record_type.value, inserted["_id"])
        return self._to_record(inserted)

    async def replace_record(self, record_id: str, payload: Any) -> BaseModel:
        """Overwrite every field of an existing record.

        The identifier from the path wins over any ``id`` in the body.
        Fields absent from ``payload`` are removed from the stored
        document; there is no merge with previous values.
        """
        oid = await self._require(record_id)
        if isinstance(payload, Mapping):
            payload = {**payload, "id": str(oid)}
        record = validate(payload, self.record_type, with_identifier=True)
        await self.collection.update({"_id": oid}, to_document(record))
        logger.info("Replaced %s %s", self.record_type.value, oid)
        return record

    async def delete_record(self, record_id: str) -> None:
        oid = await self._require(record_id)
        await self.collection.remove({"_id": oid})
        logger.info("Deleted %s %s", self.record_type.value, oid)
