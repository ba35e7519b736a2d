class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class CsvStructureError(DomainError):
    """Raised when the delimited text itself cannot be decoded."""


class RecordNotFoundError(DomainError):
    """Raised when an employee or a day is not part of the loaded dataset."""


class EnhancementError(DomainError):
    """Raised when the suggestion collaborator fails or answers garbage."""


class EnhancementUnavailableError(EnhancementError):
    """Raised when no suggestion collaborator is configured."""
