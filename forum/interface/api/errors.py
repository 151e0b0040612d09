"""Mapping of domain errors to HTTP errors."""

import logfire
from fastapi import HTTPException, status

from forum.domain.error import DomainError, NotAuthorizedError, NotFoundError


def to_http_error(error: Exception, action: str) -> HTTPException:
    """Translate an error raised by a use case into an HTTPException.

    - NotFoundError: 404
    - NotAuthorizedError: 403
    - other DomainError and ValueError (bad ids, failed validation): 400
    - anything else: 500

    Args:
        error: The raised error
        action: Short description of the failed action, used in logs

    Returns:
        HTTPException to raise
    """
    if isinstance(error, HTTPException):
        return error
    if isinstance(error, NotFoundError):
        logfire.warn(f"{action} failed - not found", error=str(error))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, NotAuthorizedError):
        logfire.warn(f"{action} failed - not authorized", error=str(error))
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, (DomainError, ValueError)):
        logfire.warn(f"{action} failed - invalid request", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    logfire.error(f"Unexpected error: {action}", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(error) or f"{action} failed",
    )
