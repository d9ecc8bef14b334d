"""
Custom Error Types for the Envelope Energy Service

The numeric engine never raises for in-catalog or edge-numeric input.
These exceptions belong to the edges around it: configuration, catalog
lookups by key, request validation and the startup self-check.
"""

from typing import Optional, Dict, Any


class EnergyModelError(Exception):
    """Base exception for all envelope energy service errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class CriticalError(EnergyModelError):
    """
    Errors that stop the request or the process.

    Examples:
    - Invalid environment configuration
    - Unknown catalog key requested by name
    """
    pass


class NonCriticalError(EnergyModelError):
    """
    Errors that are logged but never stop a calculation.

    Examples:
    - A self-check assertion failed at startup
    """
    pass


class ConfigurationError(CriticalError):
    """
    Configuration errors that prevent proper operation.

    Examples:
    - Non-positive ACH50 to ACHnat factor
    - Negative electricity price
    """
    pass


class InputValidationError(CriticalError):
    """
    Input validation errors raised outside pydantic.

    Examples:
    - Unknown airtightness preset named in a compare request
    """
    pass


class CatalogLookupError(CriticalError):
    """Unknown key for a catalog that has no documented fallback."""

    def __init__(self, catalog: str, key: str, available: Optional[list] = None):
        super().__init__(
            f"Unknown {catalog} '{key}'",
            {"catalog": catalog, "key": key, "available": available or []},
        )
        self.catalog = catalog
        self.key = key


class SelfCheckFailure(NonCriticalError):
    """One or more startup self-checks failed."""

    def __init__(self, failed: list):
        super().__init__(
            f"{len(failed)} self-check(s) failed",
            {"failed": failed},
        )
        self.failed = failed

