"""Custom exceptions for the CRM application."""


class CRMException(Exception):
    """Base exception for CRM application."""

    pass


class ValidationError(CRMException):
    """Raised when validation fails."""

    pass


class NotFoundError(CRMException):
    """Raised when a resource is not found."""

    pass


class ConflictError(CRMException):
    """Raised when a mutation would break referential integrity."""

    pass


class DatabaseError(CRMException):
    """Raised when a database operation fails."""

    pass


class ConfigurationError(CRMException):
    """Raised when configuration is invalid."""

    pass
