"""
Service layer for Frequently Asked Questions (FAQ).

FAQ entries live in the ``faqs`` collection.  They share the CRUD
behaviour of every record type and differ from quotes only in their
schema: a question and answer instead of quote text, a bare ``year``
integer and an optional ``video_url``.
"""

from quote_api.app.services.record_service import RecordService
from quote_api.app.services.validation import RecordType


class FAQService(RecordService):
    """Service class for managing FAQ entries."""

    record_type = RecordType.FAQ
