"""Failure taxonomy shared by the services and the HTTP layer.

Each error carries the status code the transport should use; the message
is what ends up in the response envelope.
"""


class ServiceError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    status_code = 400
    default_message = "Invalid request"


class Conflict(ServiceError):
    status_code = 409
    default_message = "Resource already exists"


class Unauthenticated(ServiceError):
    status_code = 401
    default_message = "Not authenticated"


class Forbidden(ServiceError):
    status_code = 403
    default_message = "Not allowed to access this resource"


class NotFound(ServiceError):
    status_code = 404
    default_message = "Resource not found"


# Token failures. The reason stays available to logs and tests but the
# message shown to callers is the same for all of them.
class TokenError(Unauthenticated):
    reason = "invalid"

    def __init__(self, detail=None):
        self.detail = detail
        super().__init__(Unauthenticated.default_message)


class TokenMalformed(TokenError):
    reason = "malformed"


class TokenSignatureInvalid(TokenError):
    reason = "signature_invalid"


class TokenExpired(TokenError):
    reason = "expired"
