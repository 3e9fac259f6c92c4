"""
Quote endpoints for API v1.

These routes expose a CRUD API over the quote collection.  The list
endpoint can be narrowed with the ``author`` and ``language`` query
parameters (exact, case-sensitive matches).  Errors are raised by the
service layer as domain exceptions and converted to HTTP responses by
the handlers registered in ``main.create_app``.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from quote_api.app.api.v1.responses import point_error_responses
from quote_api.app.core.db import DocumentStore, get_store
from quote_api.app.schemas.quote import QUOTE_EXAMPLE, QuoteRead
from quote_api.app.services.quote_service import QuoteService

router = APIRouter()

ERROR_RESPONSES = point_error_responses("quote object")


def get_quote_service(store: DocumentStore = Depends(get_store)) -> QuoteService:
    return QuoteService(store)


@router.get("/", response_model=List[QuoteRead], response_model_exclude_none=True)
async def list_quotes(
    author: Optional[str] = Query(None, description="Author's name, case sensitive"),
    language: Optional[str] = Query(None, description="Language of the quote, case sensitive"),
    service: QuoteService = Depends(get_quote_service),
) -> List[QuoteRead]:
    """Retrieve quote objects, refinable with query parameters.

    Without parameters every quote in the database is returned.  With
    parameters only quotes matching all of them are returned; an empty
    list means nothing matched.
    """
    return await service.list_records({"author": author, "language": language})


@router.get(
    "/{quote_id}",
    response_model=QuoteRead,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def get_quote(
    quote_id: str,
    service: QuoteService = Depends(get_quote_service),
) -> QuoteRead:
    """Retrieve a single quote object from the database."""
    return await service.get_record(quote_id)


@router.post(
    "/",
    response_model=QuoteRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_quote(
    payload: Any = Body(..., examples=[QUOTE_EXAMPLE]),
    service: QuoteService = Depends(get_quote_service),
) -> QuoteRead:
    """Add a quote object to the database.

    Do not include ``id`` in the body; the database generates it.  The
    response contains the quote as stored, including the new ``id``
    which can be used to target the quote in later requests.
    """
    return await service.create_record(payload)


@router.put(
    "/{quote_id}",
    response_model=QuoteRead,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def replace_quote(
    quote_id: str,
    payload: Any = Body(..., examples=[QUOTE_EXAMPLE]),
    service: QuoteService = Depends(get_quote_service),
) -> QuoteRead:
    """Replace a quote object in the database.

    Every field is overwritten with the submitted values; fields left
    out of the body are removed from the stored quote.
    """
    return await service.replace_record(quote_id, payload)


@router.delete("/{quote_id}", responses=ERROR_RESPONSES)
async def delete_quote(
    quote_id: str,
    service: QuoteService = Depends(get_quote_service),
) -> dict:
    """Remove a quote object from the database."""
    await service.delete_record(quote_id)
    return {"message": "Quote object successfully deleted from the database."}
