"""Helpers shared by the API routes."""

from __future__ import annotations

from fastapi import HTTPException, status

from journal.domain.errors import (
    Conflict,
    DomainError,
    InvalidRange,
    InvalidTransition,
    NotFound,
)

_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (NotFound, status.HTTP_404_NOT_FOUND),
    (InvalidTransition, status.HTTP_409_CONFLICT),
    (Conflict, status.HTTP_409_CONFLICT),
    (InvalidRange, 422),
)


def to_http_error(exc: ValueError) -> HTTPException:
    """Translate a use case failure into a tagged HTTP error.

    The response detail carries the error ``code`` so the client can decide
    between refreshing its list, offering a retry or showing a validation
    message.
    """

    code = getattr(exc, "code", DomainError.code)
    status_code = status.HTTP_400_BAD_REQUEST
    for error_type, mapped_status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            status_code = mapped_status
            break
    return HTTPException(status_code=status_code, detail={"code": code, "message": str(exc)})


__all__ = ["to_http_error"]
