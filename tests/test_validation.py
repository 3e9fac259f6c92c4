import pytest

from quote_api.app.core.exceptions import ValidationError
from quote_api.app.schemas.faq import FAQCreate, FAQRead
from quote_api.app.schemas.quote import QuoteCreate, QuoteRead
from quote_api.app.services.validation import RecordType, to_document, validate


def test_valid_quote_is_trimmed(quote_payload):
    quote_payload["author"] = "  Marcus Aurelius  "
    quote_payload["tags"] = [" strength ", "mindset"]
    record = validate(quote_payload, RecordType.QUOTE)
    assert isinstance(record, QuoteCreate)
    assert record.author == "Marcus Aurelius"
    assert record.tags == ["strength", "mindset"]


def test_structured_year_in_range_is_accepted():
    record = validate(
        {"author": "A", "quote": "Q", "language": "Latin", "year": {"yearNum": 180, "yearType": "CE"}},
        RecordType.QUOTE,
    )
    assert record.year.yearNum == 180
    assert record.year.yearType == "CE"


def test_structured_year_above_bound_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        validate(
            {"author": "A", "quote": "Q", "language": "Latin", "year": {"yearNum": 3000, "yearType": "CE"}},
            RecordType.QUOTE,
        )
    assert excinfo.value.fields == ["year.yearNum"]


@pytest.mark.parametrize("year", [
    {"yearNum": 12.5, "yearType": "CE"},
    {"yearNum": True, "yearType": "CE"},
    {"yearNum": -1, "yearType": "BCE"},
    {"yearNum": 100, "yearType": "AD"},
    {"yearType": "CE"},
    {"yearNum": 100},
])
def test_invalid_structured_year(year):
    with pytest.raises(ValidationError):
        validate({"author": "A", "quote": "Q", "language": "Latin", "year": year}, RecordType.QUOTE)


def test_numeric_strings_are_coerced():
    record = validate(
        {"author": "A", "quote": "Q", "language": "Greek", "year": {"yearNum": "399", "yearType": " BCE "}},
        RecordType.QUOTE,
    )
    assert record.year.yearNum == 399
    assert record.year.yearType == "BCE"


@pytest.mark.parametrize("field", ["author", "quote", "language"])
def test_missing_required_quote_field(quote_payload, field):
    del quote_payload[field]
    with pytest.raises(ValidationError) as excinfo:
        validate(quote_payload, RecordType.QUOTE)
    assert field in excinfo.value.fields


def test_blank_required_field_is_rejected(quote_payload):
    quote_payload["quote"] = "   "
    with pytest.raises(ValidationError) as excinfo:
        validate(quote_payload, RecordType.QUOTE)
    assert excinfo.value.fields == ["quote"]


def test_all_violations_are_reported():
    with pytest.raises(ValidationError) as excinfo:
        validate({"quote": "", "tags": ["ok", 7]}, RecordType.QUOTE)
    assert set(excinfo.value.fields) == {"author", "quote", "language", "tags.1"}


def test_unknown_fields_are_rejected(quote_payload):
    quote_payload["rating"] = 5
    with pytest.raises(ValidationError) as excinfo:
        validate(quote_payload, RecordType.QUOTE)
    assert excinfo.value.fields == ["rating"]


def test_non_object_payload_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        validate(["author", "quote"], RecordType.QUOTE)
    assert excinfo.value.fields == ["body"]


def test_create_mode_strips_client_identifier(quote_payload):
    quote_payload["id"] = "60a6d98c5eddcd1ca84e9c9b"
    quote_payload["_id"] = "60a6d98c5eddcd1ca84e9c9b"
    record = validate(quote_payload, RecordType.QUOTE)
    assert "id" not in record.model_dump()


def test_identifier_mode_requires_id(quote_payload):
    with pytest.raises(ValidationError) as excinfo:
        validate(quote_payload, RecordType.QUOTE, with_identifier=True)
    assert excinfo.value.fields == ["id"]

    quote_payload["id"] = "60a6d98c5eddcd1ca84e9c9b"
    record = validate(quote_payload, RecordType.QUOTE, with_identifier=True)
    assert isinstance(record, QuoteRead)
    assert record.id == "60a6d98c5eddcd1ca84e9c9b"


def test_identifier_mode_accepts_mongo_style_id(quote_payload):
    quote_payload["_id"] = "60a6d98c5eddcd1ca84e9c9b"
    record = validate(quote_payload, RecordType.QUOTE, with_identifier=True)
    assert record.id == "60a6d98c5eddcd1ca84e9c9b"


def test_tags_default_to_empty():
    record = validate({"author": "A", "quote": "Q", "language": "L"}, RecordType.QUOTE)
    assert record.tags == []


def test_valid_faq(faq_payload):
    record = validate(faq_payload, RecordType.FAQ)
    assert isinstance(record, FAQCreate)
    assert record.video_url == "https://videos.example.com/submitting"


@pytest.mark.parametrize("year", [1899, 1997, "nineteen", 1950.5])
def test_faq_year_bounds(faq_payload, year):
    faq_payload["year"] = year
    with pytest.raises(ValidationError) as excinfo:
        validate(faq_payload, RecordType.FAQ)
    assert excinfo.value.fields == ["year"]


def test_faq_rejects_structured_year(faq_payload):
    faq_payload["year"] = {"yearNum": 1950, "yearType": "CE"}
    with pytest.raises(ValidationError):
        validate(faq_payload, RecordType.FAQ)


def test_faq_rejects_malformed_uri(faq_payload):
    faq_payload["video_url"] = "not a uri"
    with pytest.raises(ValidationError) as excinfo:
        validate(faq_payload, RecordType.FAQ)
    assert excinfo.value.fields == ["video_url"]


def test_faq_identifier_mode(faq_payload):
    faq_payload["id"] = "60a6d98c5eddcd1ca84e9c9c"
    assert isinstance(validate(faq_payload, RecordType.FAQ, with_identifier=True), FAQRead)


def test_error_message_does_not_echo_values(quote_payload):
    quote_payload["year"] = {"yearNum": 3000, "yearType": "CE"}
    quote_payload["quote"] = "secret text that must not leak"
    quote_payload["tags"] = [12345]
    with pytest.raises(ValidationError) as excinfo:
        validate(quote_payload, RecordType.QUOTE)
    assert "secret text" not in str(excinfo.value)
    assert "12345" not in str(excinfo.value)


def test_to_document_drops_id_and_absent_fields():
    record = validate(
        {"id": "60a6d98c5eddcd1ca84e9c9b", "author": "A", "quote": "Q", "language": "L"},
        RecordType.QUOTE,
        with_identifier=True,
    )
    assert to_document(record) == {"author": "A", "quote": "Q", "language": "L", "tags": []}
