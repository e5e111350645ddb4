"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application. The HTTP layer maps them
to status codes in utils.error_handlers.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        details = {"missing_keys": missing_keys} if missing_keys else {}
        super().__init__(message, details)


class ValidationError(ApplicationError):
    """Raised when input is malformed or missing, before storage is touched"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class DateParseError(ValidationError):
    """Raised when a date string is not a valid YYYY-MM-DD calendar date"""

    def __init__(self, value: str, field: str = "dob"):
        self.value = value
        super().__init__(
            f"{field} must be a valid date in YYYY-MM-DD format",
            {field: value},
        )


class NotFoundError(ApplicationError):
    """Raised when a requested record does not exist"""

    def __init__(self, resource: str, identifier, message: str | None = None):
        details = {"resource": resource, "id": identifier}
        msg = message or f"{resource.capitalize()} not found"
        super().__init__(msg, details)


class StorageError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
