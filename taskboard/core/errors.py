"""
Domain errors raised by the service layer.

Services never raise HTTPException; the API layer maps these to responses
(see taskboard.api.error_handlers).
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for all service-level failures."""

    code = "service_error"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"detail": self.message, "code": self.code}


class NotFoundError(ServiceError):
    """Requested entity (by id, username or membership) does not exist."""

    code = "not_found"
    http_status = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    """
    A uniqueness/referential constraint was violated, or the row changed
    under us, at write time.

    The message is the store's detail, passed through as-is.
    """

    code = "conflict"
    http_status = status.HTTP_409_CONFLICT
