"""OpenAPI response documentation shared by the record endpoints."""

from typing import Any, Dict

from fastapi import status


def point_error_responses(record_name: str) -> Dict[int, Dict[str, Any]]:
    """Error responses of routes addressed by a record id."""
    return {
        status.HTTP_400_BAD_REQUEST: {"description": "Invalid format for the submitted id"},
        status.HTTP_404_NOT_FOUND: {"description": f"No {record_name} exists at the submitted id"},
    }
