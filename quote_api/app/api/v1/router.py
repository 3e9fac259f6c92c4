"""
Top‑level router for version 1 of the API.

This router aggregates the record-type routers (quotes, FAQ entries)
under a unified prefix.  When a new record type is introduced, include
its router here.
"""

from fastapi import APIRouter

from .endpoints import faqs, quotes

router = APIRouter()


@router.get("/", tags=["info"])
async def api_index() -> dict:
    """List the resources available in this API version."""
    return {"message": "Quote API v1", "resources": ["/quotes", "/faqs"]}


router.include_router(quotes.router, prefix="/quotes", tags=["quotes"])
router.include_router(faqs.router, prefix="/faqs", tags=["faqs"])
