"""
Translation of data store failures into HTTP errors
"""

from fastapi import HTTPException, status
from postgrest.exceptions import APIError
from typing import Optional
import httpx
import logging

logger = logging.getLogger(__name__)

# Postgres SQLSTATE codes surfaced by PostgREST
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def store_error(
    exc: Exception,
    detail: Optional[str] = None,
    conflict_detail: Optional[str] = None,
) -> HTTPException:
    """Map a store exception to an HTTPException.

    ``detail`` replaces the store's own message (used for fetch failures);
    ``conflict_detail`` replaces it for unique-constraint violations only.
    """
    if isinstance(exc, HTTPException):
        return exc

    if isinstance(exc, APIError):
        if exc.code == UNIQUE_VIOLATION:
            return HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=conflict_detail or detail or exc.message,
            )
        if exc.code == FOREIGN_KEY_VIOLATION:
            return HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=detail or "Referenced record does not exist",
            )
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail or exc.message or "Request rejected by data store",
        )

    if isinstance(exc, httpx.HTTPError):
        logger.error(f"Data store unreachable: {exc}")
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=detail or "Data store is unreachable",
        )

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail or str(exc),
    )
