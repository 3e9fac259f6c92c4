"""
Pydantic schemas for FAQ entries.

An FAQ entry pairs a question with its answer, attributed to an
author and written in a given language.  Unlike quotes, the optional
``year`` is a bare integer between 1900 and 1996.  An entry may link
to an explanatory video through ``video_url``.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .common import NonEmptyStr, check_http_url, reject_bool

FAQ_EXAMPLE = {
    "author": "Support Team",
    "question": "Can I submit my own quotes?",
    "answer": "Yes. POST a quote object without an id to /api/v1/quotes/.",
    "language": "English",
    "year": 1996,
    "source": "Quote API handbook",
    "video_url": "https://videos.example.com/submitting-quotes",
    "tags": ["contributing"],
}


class FAQBase(BaseModel):
    author: NonEmptyStr = Field(..., description="Who wrote the answer")
    question: NonEmptyStr = Field(..., description="The question as asked")
    answer: NonEmptyStr = Field(..., description="Answer text for the question")
    language: NonEmptyStr = Field(..., description="Language of the question and answer")
    year: Optional[int] = Field(None, ge=1900, le=1996, description="Year the entry refers to")
    source: Optional[NonEmptyStr] = Field(None, description="Where the answer comes from")
    video_url: Optional[NonEmptyStr] = Field(None, description="Link to a video explaining the answer")
    tags: List[NonEmptyStr] = Field(default_factory=list, description="Keywords related to the entry")

    model_config = {"extra": "forbid"}

    @field_validator("year", mode="before")
    @classmethod
    def check_year(cls, v):
        return reject_bool(v)

    @field_validator("video_url")
    @classmethod
    def validate_video_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return check_http_url(v)


class FAQCreate(FAQBase):
    """Schema for creating a new FAQ entry."""

    model_config = {
        "extra": "forbid",
        "json_schema_extra": {"example": FAQ_EXAMPLE},
    }


class FAQRead(FAQBase):
    """Schema for reading an FAQ entry."""

    id: NonEmptyStr = Field(..., description="Unique hex ID generated by the database on creation")

    model_config = {
        "extra": "forbid",
        "json_schema_extra": {"example": {"id": "60a6d98c5eddcd1ca84e9c9c", **FAQ_EXAMPLE}},
    }
