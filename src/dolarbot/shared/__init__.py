"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Response caching
- Locale-aware number handling
- Validation
- Logging configuration
"""

from dolarbot.shared.cache import ResponseCache
from dolarbot.shared.numbers import format_decimal, parse_decimal
from dolarbot.shared.validators import parse_tax_percent, validate_api_url

__all__ = [
    "ResponseCache",
    "parse_decimal",
    "format_decimal",
    "validate_api_url",
    "parse_tax_percent",
]
