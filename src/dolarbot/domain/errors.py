"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions that represent
business rule violations and domain errors.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class ConfigurationError(DomainError):
    """Raised when a configuration value is missing or malformed."""
    pass


class UpstreamError(DomainError):
    """Raised when an upstream payload cannot be turned into a domain model."""
    pass
