"""
FAQ endpoints for API v1.

These routes expose a CRUD API for frequently asked questions, with
the same shape as the quote endpoints: a filterable list, point
lookups by id, creation, full replacement and deletion.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from quote_api.app.api.v1.responses import point_error_responses
from quote_api.app.core.db import DocumentStore, get_store
from quote_api.app.schemas.faq import FAQ_EXAMPLE, FAQRead
from quote_api.app.services.faq_service import FAQService

router = APIRouter()

ERROR_RESPONSES = point_error_responses("FAQ entry")


def get_faq_service(store: DocumentStore = Depends(get_store)) -> FAQService:
    return FAQService(store)


@router.get("/", response_model=List[FAQRead], response_model_exclude_none=True)
async def list_faqs(
    author: Optional[str] = Query(None, description="Author's name, case sensitive"),
    language: Optional[str] = Query(None, description="Language of the entry, case sensitive"),
    service: FAQService = Depends(get_faq_service),
) -> List[FAQRead]:
    """Return FAQ entries, optionally filtered by author and language."""
    return await service.list_records({"author": author, "language": language})


@router.get(
    "/{faq_id}",
    response_model=FAQRead,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def get_faq(faq_id: str, service: FAQService = Depends(get_faq_service)) -> FAQRead:
    """Retrieve a single FAQ by ID.

    Returns HTTP 404 if the entry is not found and HTTP 400 if the ID
    is not a valid identifier.
    """
    return await service.get_record(faq_id)


@router.post(
    "/",
    response_model=FAQRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_faq(
    payload: Any = Body(..., examples=[FAQ_EXAMPLE]),
    service: FAQService = Depends(get_faq_service),
) -> FAQRead:
    """Create a new FAQ entry."""
    return await service.create_record(payload)


@router.put(
    "/{faq_id}",
    response_model=FAQRead,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def replace_faq(
    faq_id: str,
    payload: Any = Body(..., examples=[FAQ_EXAMPLE]),
    service: FAQService = Depends(get_faq_service),
) -> FAQRead:
    """Replace an existing FAQ entry."""
    return await service.replace_record(faq_id, payload)


@router.delete("/{faq_id}", responses=ERROR_RESPONSES)
async def delete_faq(faq_id: str, service: FAQService = Depends(get_faq_service)) -> dict:
    """Delete an FAQ entry."""
    await service.delete_record(faq_id)
    return {"message": "FAQ entry successfully deleted from the database."}
