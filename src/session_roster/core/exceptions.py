class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidFormatError(ValidationError):
    """Raised when a date time string does not match the session format."""


class InvalidSessionError(ValidationError):
    """Raised when a session starts at or after its end, or has an invalid name/location."""


class DuplicateError(DomainError):
    """Raised when an element with the same identity is already stored."""


class ElementNotFoundError(DomainError):
    """Raised when an element to replace or remove is not stored."""


class SessionNotFoundError(ElementNotFoundError):
    """Raised when a session is not in the registry."""


class PersonNotFoundError(ElementNotFoundError):
    """Raised when a person is not enrolled in a session."""


class MissingPayRateError(DomainError):
    """Raised when payroll meets a present attendee without a recorded pay rate."""
