# src/dolarbot/application/api_calls.py
"""
API Calls - Entry Point for Every Upstream Query

ApiCalls wires settings, the response cache and the api-dolar-argentina
client together, and turns failed upstream calls into log records.

Files that USE this module:
- dolarbot.app (builds ApiCalls and queries every quote)
- tests.test_api_calls (unit tests)

Files that this module USES:
- dolarbot.adapters.providers.dolar_argentina (DolarArgentinaApi client)
- dolarbot.shared.cache (ResponseCache)
- dolarbot.config (settings)
- dolarbot.domain.models (result and error types)
"""
from __future__ import annotations

import asyncio
import logging
from typing import Dict, Iterable, Optional

from dolarbot.adapters.providers.dolar_argentina import DolarArgentinaApi
from dolarbot.config import Settings
from dolarbot.domain.models import ApiError, CountryRisk, DollarQuote, DollarType
from dolarbot.shared.cache import ResponseCache


class ApiCalls:
    """
    Centralizes all API calls in a single object.

    Attributes:
        cache: Response cache shared by every API client
        dolar_argentina: Client for the api-dolar-argentina service
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the cache and the API clients.

        Args:
            settings: Optional settings (defaults to the global settings)
            logger: Logger receiving API errors (defaults to this module's logger)
        """
        if settings is None:
            from dolarbot.config import settings as default_settings
            settings = default_settings
        self.logger = logger or logging.getLogger(__name__)
        self.cache = ResponseCache(ttl=settings.cache_ttl)
        self.dolar_argentina = DolarArgentinaApi(self.cache, self, settings=settings)

    def report(self, error: ApiError) -> None:
        """Log a failed upstream call."""
        message = "API error. Endpoint returned %s: %s"
        if error.exception is not None:
            self.logger.error(message, error.status_code, error.description, exc_info=error.exception)
        else:
            self.logger.error(message, error.status_code, error.description)

    async def fetch_quote(self, kind: DollarType) -> Optional[DollarQuote]:
        """Get one dollar quote; None means the error was already logged."""
        return await self.dolar_argentina.get_dollar_price(kind)

    async def fetch_indicator(self) -> Optional[CountryRisk]:
        """Get the country-risk indicator; None means the error was already logged."""
        return await self.dolar_argentina.get_riesgo_pais()

    async def fetch_quotes(
        self, kinds: Optional[Iterable[DollarType]] = None
    ) -> Dict[DollarType, Optional[DollarQuote]]:
        """
        Get several dollar quotes concurrently.

        Args:
            kinds: Dollar types to query (defaults to every DollarType)

        Returns:
            Mapping from dollar type to its quote, or None for failed calls
        """
        kinds = list(DollarType) if kinds is None else list(dict.fromkeys(kinds))
        results = await asyncio.gather(*(self.fetch_quote(kind) for kind in kinds))
        return dict(zip(kinds, results))
