"""
Error types raised by controllers and service wrappers.
Every error carries the HTTP status and title used by the error middleware
to build the {title, message} envelope.
"""
from typing import Any, Dict, Optional


class ApiError(Exception):
    """Base error rendered as a JSON envelope"""

    status = 500
    title = "Error"

    def __init__(self, message: str, status: Optional[int] = None, title: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status
        if title is not None:
            self.title = title

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "message": self.message}


class ValidationError(ApiError):
    status = 400
    title = "Validation error"


class AuthenticationError(ApiError):
    status = 401
    title = "Authentication error"


class NotFoundError(ApiError):
    status = 404
    title = "Not found"


class ProviderError(ApiError):
    """Failure reported by Firebase Auth, Firestore or Cloud Storage"""

    status = 500
    title = "Provider error"

    @classmethod
    def from_exception(cls, error: Exception, title: Optional[str] = None,
                       status: Optional[int] = None) -> "ProviderError":
        """Wrap a client library exception, keeping its message.

        Firebase errors that carry an HTTP response keep its status code
        unless an explicit status is given.
        """
        if status is None:
            http_response = getattr(error, "http_response", None)
            status = getattr(http_response, "status_code", None)
            if not isinstance(status, int) or status < 400:
                status = cls.status
        message = str(error) or type(error).__name__
        return cls(message, status=status, title=title)
