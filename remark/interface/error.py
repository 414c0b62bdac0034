"""Interface layer error mapping."""

import logfire
from fastapi import HTTPException, status

from remark.domain.error import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (InvalidStateError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP response classification.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException with the matching status code and the error message
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            logfire.warn(
                "Request rejected",
                error=str(error),
                error_type=type(error).__name__,
                status_code=status_code,
            )
            return HTTPException(status_code=status_code, detail=str(error))

    logfire.error("Unmapped domain error", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Unexpected error",
    )
