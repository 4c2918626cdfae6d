"""
Core Exceptions
================

Custom exceptions for the application following clean architecture principles.

These exceptions define domain-specific errors that can be caught and handled
appropriately at the application boundaries.
"""

from typing import Optional


class ApplicationException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DomainException(ApplicationException):
    """Base exception for domain logic violations."""


class RepositoryException(ApplicationException):
    """Base exception for repository/data access errors."""


class ValidationException(ApplicationException):
    """Exception for validation errors."""


class ResourceNotFoundException(ApplicationException):
    """Exception when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: Optional[str] = None,
        details: Optional[dict] = None
    ):
        self.resource_type = resource_type
        self.resource_id = resource_id
        message = f"{resource_type}"
        if resource_id:
            message += f" with id '{resource_id}'"
        message += " not found"
        super().__init__(message, details)


class ConfigurationException(ApplicationException):
    """Exception for configuration errors."""


class RegistrationException(ConfigurationException):
    """Raised when a service contract has no binding in the registry."""

    def __init__(self, contracts: list, details: Optional[dict] = None):
        self.contracts = list(contracts)
        names = ", ".join(getattr(c, "__name__", str(c)) for c in self.contracts)
        super().__init__(
            f"No service registered for: {names}",
            details or {"contracts": [getattr(c, "__name__", str(c)) for c in self.contracts]}
        )


class MigrationException(ApplicationException):
    """Raised when database migrations cannot be applied."""

    def __init__(
        self,
        attempts: int,
        cause: Optional[BaseException] = None,
        details: Optional[dict] = None
    ):
        self.attempts = attempts
        self.cause = cause
        message = f"Failed to apply migrations after {attempts} attempts"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message, details or {"attempts": attempts})
