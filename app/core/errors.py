from __future__ import annotations

import logging

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


class ServiceError(RuntimeError):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidStateError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT


class ModelResponseError(ServiceError):
    """Model output could not be turned into the expected JSON payload."""


class UpstreamError(ServiceError):
    """A third-party collaborator (PDF parser, model API) failed."""


def to_http_exception(exc: ServiceError, fallback: str) -> HTTPException:
    """4xx errors keep their message; 5xx errors are logged and answered generically."""
    if exc.status_code >= 500:
        logger.error("%s: %s", fallback, exc, exc_info=exc)
        return HTTPException(status_code=exc.status_code, detail=fallback)
    return HTTPException(status_code=exc.status_code, detail=exc.message)
