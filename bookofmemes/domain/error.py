"""Domain layer errors.

Every error raised out of a service or use case belongs to this taxonomy.
The interface layer maps each class onto one HTTP status.
"""


class DomainError(Exception):
    """Base domain error."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Missing or malformed input."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class AuthError(DomainError):
    """Missing or invalid credential."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class UpstreamError(DomainError):
    """A record store call failed.

    The message carries the driver detail for logging. It is never sent
    to clients.
    """

    def __init__(self, operation: str, collection: str, detail: str):
        self.operation = operation
        self.collection = collection
        self.detail = detail
        super().__init__(f"{operation} on {collection} failed: {detail}")


# Read-side failures are reported under this name in the comment and feed paths
FetchError = UpstreamError
