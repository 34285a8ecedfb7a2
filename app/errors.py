"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
VALIDATION_ERROR = "VALIDATION_ERROR"
STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class DuplicateResourceError(DomainError):
    """Raised when attempting to create or update a resource that would violate a uniqueness constraint."""

    pass


class DomainValidationError(DomainError):
    """Raised when business rules or domain validation fail (e.g. invalid status transition)."""

    pass


class StoreAccessError(DomainError):
    """Raised when a call to the underlying store fails.

    Carries the operation that failed and, for searches, the term in effect.
    """

    def __init__(self, operation: str, search_term: str | None = None):
        self.operation = operation
        self.search_term = search_term
        message = f"Store access failed during '{operation}'"
        if search_term is not None:
            message += f" (search term: {search_term!r})"
        super().__init__(message)
