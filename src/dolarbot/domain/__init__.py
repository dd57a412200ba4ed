"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from dolarbot.domain.models import (
    ApiError,
    CountryRisk,
    DollarQuote,
    DollarType,
)
from dolarbot.domain.errors import (
    ConfigurationError,
    DomainError,
    UpstreamError,
)

__all__ = [
    "DollarType",
    "DollarQuote",
    "CountryRisk",
    "ApiError",
    "DomainError",
    "ConfigurationError",
    "UpstreamError",
]
