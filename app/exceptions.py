from typing import Any, Mapping, Optional


class AppError(Exception):
    """Base class for errors the API layer turns into client responses.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context
        code: machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Application error"
    default_code: Optional[str] = None

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(AppError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"
    default_code = "SERVICE_VALIDATION_ERROR"


class PauseLimitError(ServiceValidationError):
    """Raised when a subscription has already used its whole pause allowance."""

    default_message = "Max pause limit reached"
    default_code = "PAUSE_LIMIT_REACHED"


class NotFoundError(AppError):
    """Raised when a referenced user, plan, subscription, menu day or request is absent."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"
