"""
Service Errors

Raised by services and turned into the JSON error envelope by controllers.
"""


class ServiceError(Exception):
    """Base error carrying an error code and HTTP status."""
    code = "SERVICE_ERROR"
    status = 400

    def __init__(self, message: str, code: str = None, **extra):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.extra = extra


class NotFoundError(ServiceError):
    code = "NOT_FOUND"
    status = 404


class ForbiddenError(ServiceError):
    code = "FORBIDDEN"
    status = 403


class ProfileRequiredError(ServiceError):
    code = "PROFILE_REQUIRED"
    status = 409


class NoCandidatesError(ServiceError):
    """No meal could be placed in one or more plan slots."""
    code = "NO_CANDIDATES"
    status = 422


class EmptyGroceryListError(ServiceError):
    """The meal plan has no ingredients to shop for."""
    code = "NO_INGREDIENTS"
    status = 422
