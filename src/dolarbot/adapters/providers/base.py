# src/dolarbot/adapters/providers/base.py
"""
Base Interfaces for Quote Providers

This module defines the contract that quote providers implement and the
error-reporting capability injected into them.

Files that USE this module:
- dolarbot.adapters.providers.dolar_argentina (DolarArgentinaApi implements QuoteProvider)
- dolarbot.application.api_calls (ApiCalls implements ErrorReporter)
- tests.* (stub reporters)

Files that this module USES:
- dolarbot.domain.models (result and error types)
"""
from abc import ABC, abstractmethod
from typing import Optional, Protocol

from dolarbot.domain.models import ApiError, CountryRisk, DollarQuote, DollarType


class ErrorReporter(Protocol):
    """Receives failed upstream calls. Implementations must not raise."""

    def report(self, error: ApiError) -> None:
        ...


class QuoteProvider(ABC):
    @abstractmethod
    async def get_dollar_price(self, kind: DollarType) -> Optional[DollarQuote]:
        """Return the quote for ``kind``, or None if the upstream call failed."""
        raise NotImplementedError

    @abstractmethod
    async def get_riesgo_pais(self) -> Optional[CountryRisk]:
        """Return the country-risk indicator, or None if the upstream call failed."""
        raise NotImplementedError
