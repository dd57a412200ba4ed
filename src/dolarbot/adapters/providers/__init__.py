"""
Provider Adapters - External API Clients

This package contains the client for the api-dolar-argentina service
and the registry of its endpoints.
"""

from dolarbot.adapters.providers.base import ErrorReporter, QuoteProvider
from dolarbot.adapters.providers.dolar_argentina import DolarArgentinaApi
from dolarbot.adapters.providers.endpoints import ENDPOINTS, path_for

__all__ = [
    "ErrorReporter",
    "QuoteProvider",
    "DolarArgentinaApi",
    "ENDPOINTS",
    "path_for",
]
