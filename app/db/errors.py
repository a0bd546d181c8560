"""
Error kinds raised anywhere in the application.

Each error carries the HTTP status and a machine-readable code; the
application registers a single handler that renders them, so domain
modules never import FastAPI.
"""


class CarShareError(Exception):
    statusCode = 500
    code = "SERVER_ERROR"

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def toDict(self) -> dict:
        body = {"status": "error", "code": self.code, "message": self.message}
        if self.field:
            body["field"] = self.field
        return body


class ValidationError(CarShareError):
    """Malformed or policy-violating request input."""
    statusCode = 400
    code = "VALIDATION_ERROR"


class NotAuthenticatedError(CarShareError):
    statusCode = 401
    code = "NOT_AUTHENTICATED"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class VerificationRequiredError(CarShareError):
    """The acting user must finish identity verification before retrying."""
    statusCode = 403
    code = "VERIFICATION_REQUIRED"

    def __init__(self, message: str = "Identity verification is required before booking"):
        super().__init__(message)


class ForbiddenError(CarShareError):
    statusCode = 403
    code = "FORBIDDEN"


class NotFoundError(CarShareError):
    statusCode = 404
    code = "NOT_FOUND"


class ConflictError(CarShareError):
    statusCode = 409
    code = "CONFLICT"


class TransitionError(CarShareError):
    """Illegal booking status change, reported to the user as a no-op."""
    statusCode = 409
    code = "INVALID_TRANSITION"


class PersistenceError(CarShareError):
    statusCode = 500
    code = "PERSISTENCE_ERROR"
