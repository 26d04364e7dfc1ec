class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "DOMAIN_ERROR"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "VALIDATION_ERROR"


class NotFoundError(DomainError):
    """Raised when a student, record or date has no stored entry."""

    code = "NOT_FOUND"


class DuplicateCheckInError(DomainError):
    """Raised when the student already has a record for that calendar date."""

    code = "DUPLICATE_CHECK_IN"


class InvalidInputError(ValidationError):
    """Raised for malformed projection inputs."""

    code = "INVALID_INPUT"


class UnreachableTargetError(DomainError):
    """Target of 100% can never be reached once a class was missed."""

    code = "UNREACHABLE"


class UnboundedTargetError(DomainError):
    """Target of 0% allows an unlimited number of missed classes."""

    code = "UNBOUNDED"


class StorageUnavailableError(Exception):
    """Raised when the backing store cannot be reached or times out."""

    code = "STORAGE_UNAVAILABLE"
