"""Application error taxonomy.

Every error raised by the services and repositories derives from
``FlowboardError``. The API layer turns them into ``{"error", "message"}``
payloads using ``code`` and picks the HTTP status; nothing else about the
error (store detail, token internals) reaches the client.
"""


class FlowboardError(Exception):
    """Base class for errors surfaced to API clients."""

    code = "error"
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(FlowboardError):
    """Missing or invalid input."""

    code = "validation_error"
    message = "Invalid input"


class Unauthenticated(FlowboardError):
    """No acting identity, or the presented credential was rejected."""

    code = "unauthorized"
    message = "Authentication required"


class InvalidCredentials(Unauthenticated):
    """Unknown email or wrong password. The two cases are indistinguishable."""

    code = "invalid_credentials"
    message = "Invalid email or password"


class InvalidToken(Unauthenticated):
    """A bearer token failed verification."""

    message = "Invalid or expired token"


class MalformedToken(InvalidToken):
    pass


class BadSignature(InvalidToken):
    pass


class TokenExpired(InvalidToken):
    pass


class UnexpectedAlgorithm(InvalidToken):
    pass


class NotFound(FlowboardError):
    """Resource is absent, or is not owned by the acting identity."""

    code = "not_found"
    message = "Not found"


class Conflict(FlowboardError):
    code = "conflict"
    message = "Conflict"


class UserExists(Conflict):
    message = "Email already registered"


class StoreFailure(FlowboardError):
    """Opaque storage fault. Details go to the log, never to the client."""

    code = "internal_error"
    message = "Internal server error"
