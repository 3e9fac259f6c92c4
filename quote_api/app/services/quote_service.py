"""Service layer for quotes."""

from quote_api.app.services.record_service import RecordService
from quote_api.app.services.validation import RecordType


class QuoteService(RecordService):
    """CRUD operations on the ``quotes`` collection."""

    record_type = RecordType.QUOTE
