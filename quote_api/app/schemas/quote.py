"""
Pydantic schemas for quotes.

A quote records who said something, the text itself and the language
it was said in.  The optional ``year`` is an era-qualified year
(``{"yearNum": 180, "yearType": "CE"}``) so that quotes from antiquity
can be represented.  ``QuoteCreate`` is the shape accepted on creation
(no identifier); ``QuoteRead`` adds the store-assigned ``id`` and is
used both for responses and for validating full replacements.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .common import NonEmptyStr, reject_bool, strip_text

QUOTE_EXAMPLE = {
    "author": "Marcus Aurelius",
    "quote": "You have power over your mind, not outside events. "
    "Realize this, and you will find strength.",
    "language": "English",
    "year": {"yearNum": 180, "yearType": "CE"},
    "source": "Meditations",
    "tags": ["strength", "mindset", "power"],
}


class Year(BaseModel):
    """Year of origin qualified by calendar era."""

    yearNum: int = Field(..., ge=0, le=2020, description="The numerical value of the quote origin year")
    yearType: Literal["BCE", "CE"] = Field(..., description='Either "BCE" or "CE" to denote the calendar era')

    model_config = {"extra": "forbid"}

    @field_validator("yearNum", mode="before")
    @classmethod
    def check_year_num(cls, v):
        return reject_bool(v)

    @field_validator("yearType", mode="before")
    @classmethod
    def strip_year_type(cls, v):
        return strip_text(v)


class QuoteBase(BaseModel):
    author: NonEmptyStr = Field(..., description='The author of the quote ("unknown" if author is not known)')
    quote: NonEmptyStr = Field(..., description="The text for the entire quote")
    language: NonEmptyStr = Field(..., description="Primary language of the quote")
    year: Optional[Year] = Field(None, description="The year of quote origination")
    source: Optional[NonEmptyStr] = Field(None, description="The source text of the quote")
    tags: List[NonEmptyStr] = Field(default_factory=list, description="Keywords related to the quote")

    model_config = {"extra": "forbid"}


class QuoteCreate(QuoteBase):
    """Schema for creating a quote; the identifier is assigned by the store."""

    model_config = {
        "extra": "forbid",
        "json_schema_extra": {"example": QUOTE_EXAMPLE},
    }


class QuoteRead(QuoteBase):
    """Schema for a stored quote."""

    id: NonEmptyStr = Field(
        ...,
        description="Unique hex ID for the quote object, generated by the database on creation",
    )

    model_config = {
        "extra": "forbid",
        "json_schema_extra": {"example": {"id": "60a6d98c5eddcd1ca84e9c9b", **QUOTE_EXAMPLE}},
    }
