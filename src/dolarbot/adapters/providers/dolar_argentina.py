"""
api-dolar-argentina Provider for Argentine Dollar Quotes

This module implements the client for https://github.com/Castrogiovanni20/api-dolar-argentina.
Every request goes through the shared response cache first; on a miss the
endpoint is fetched once, normalized into a domain model, adjusted when
needed and cached. Failed calls are handed to the injected ErrorReporter
and surface to the caller as None.

Files that USE this module:
- dolarbot.application.api_calls (ApiCalls owns a DolarArgentinaApi)
- tests.test_dolar_argentina (unit tests)

Files that this module USES:
- dolarbot.adapters.providers.base (QuoteProvider and ErrorReporter interfaces)
- dolarbot.adapters.providers.endpoints (DollarType to path mapping)
- dolarbot.shared.cache (ResponseCache)
- dolarbot.shared.numbers (locale-aware decimal handling)
- dolarbot.shared.validators (parse_tax_percent)
- dolarbot.config (settings for API URL, timeout and tax percent)
"""
import asyncio
import logging
from dataclasses import replace
from decimal import Decimal
from functools import partial
from typing import Any, Callable, Optional, TypeVar

import requests

from dolarbot.adapters.providers.base import ErrorReporter, QuoteProvider
from dolarbot.adapters.providers.endpoints import (
    RIESGO_PAIS_CACHE_KEY,
    RIESGO_PAIS_ENDPOINT,
    path_for,
)
from dolarbot.config import Settings
from dolarbot.domain.errors import UpstreamError
from dolarbot.domain.models import ApiError, CountryRisk, DollarQuote, DollarType
from dolarbot.shared.cache import ResponseCache
from dolarbot.shared.numbers import format_decimal, parse_decimal
from dolarbot.shared.validators import parse_tax_percent

log = logging.getLogger(__name__)

T = TypeVar("T")


def _require_object(data: Any) -> dict:
    if not isinstance(data, dict):
        raise UpstreamError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _field(data: dict, name: str) -> str:
    value = data.get(name)
    if value is None:
        raise UpstreamError(f"response missing '{name}' field")
    return str(value)


def _optional_field(data: dict, name: str) -> Optional[str]:
    value = data.get(name)
    return None if value is None else str(value)


class DolarArgentinaApi(QuoteProvider):
    """
    Client for the api-dolar-argentina REST service.

    The service returns quotes as ``{"fecha": ..., "compra": ..., "venta": ...}``
    and the country risk as ``{"fecha": ..., "valor": ...}``, with numbers
    written in en-US format.
    """

    API_CULTURE = "en-US"

    def __init__(
        self,
        cache: ResponseCache,
        on_error: ErrorReporter,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the client.

        Args:
            cache: Response cache shared with the facade
            on_error: Receives every failed upstream call
            settings: Optional settings (defaults to the global settings)
        """
        if settings is None:
            from dolarbot.config import settings as default_settings
            settings = default_settings
        self.settings = settings
        self.base_url = settings.api_url.rstrip("/")
        self.timeout = settings.http_timeout_seconds
        self.cache = cache
        self.on_error = on_error

    def get_api_culture(self) -> str:
        """Return the culture name the API writes numbers in."""
        return self.API_CULTURE

    async def get_dollar_price(self, kind: DollarType) -> Optional[DollarQuote]:
        """
        Get the quote for a dollar type.

        Args:
            kind: Dollar type to query

        Returns:
            Normalized DollarQuote, or None if the upstream call failed

        Raises:
            ConfigurationError: If kind is AHORRO and DOLLAR_TAX_PERCENT is malformed
        """
        cached = self.cache.get(kind, DollarQuote)
        if cached is not None:
            log.debug("Using cached %s quote", kind.name)
            return cached

        quote = await self._fetch(path_for(kind), partial(self._parse_quote, kind=kind))
        if quote is None:
            return None

        if kind is DollarType.AHORRO:
            quote = self._apply_tax(quote)

        self.cache.put(kind, quote)
        log.info("%s quote updated: buy=%s sell=%s", kind.name, quote.buy, quote.sell)
        return quote

    async def get_riesgo_pais(self) -> Optional[CountryRisk]:
        """
        Get the country-risk indicator.

        Returns:
            CountryRisk, or None if the upstream call failed
        """
        cached = self.cache.get(RIESGO_PAIS_CACHE_KEY, CountryRisk)
        if cached is not None:
            log.debug("Using cached country risk")
            return cached

        risk = await self._fetch(RIESGO_PAIS_ENDPOINT, self._parse_country_risk)
        if risk is None:
            return None

        self.cache.put(RIESGO_PAIS_CACHE_KEY, risk)
        log.info("Country risk updated: %s", risk.value)
        return risk

    async def _fetch(self, endpoint: str, parse: Callable[[Any], T]) -> Optional[T]:
        """
        GET one endpoint and parse its JSON body.

        The blocking request runs in the default executor. Any failure is
        reported through ``on_error`` and turned into None.
        """
        url = f"{self.base_url}{endpoint}"
        loop = asyncio.get_running_loop()
        try:
            log.info("Fetching %s", url)
            resp = await loop.run_in_executor(
                None,
                partial(
                    requests.get,
                    url,
                    timeout=self.timeout,
                    headers={"Accept": "application/json"},
                ),
            )
        except requests.exceptions.Timeout as e:
            self._report(ApiError(0, f"Timeout after {self.timeout}s", endpoint, e))
            return None
        except requests.exceptions.RequestException as e:
            self._report(ApiError(0, str(e) or type(e).__name__, endpoint, e))
            return None

        if not 200 <= resp.status_code < 300:
            self._report(ApiError(resp.status_code, resp.reason or "", endpoint))
            return None

        try:
            return parse(resp.json())
        except (ValueError, UpstreamError) as e:
            self._report(ApiError(resp.status_code, "Invalid response payload", endpoint, e))
            return None

    def _report(self, error: ApiError) -> None:
        try:
            self.on_error.report(error)
        except Exception:
            log.exception("Error reporter failed while handling %s", error.endpoint)

    @staticmethod
    def _parse_quote(data: Any, kind: DollarType) -> DollarQuote:
        data = _require_object(data)
        return DollarQuote(
            buy=_field(data, "compra"),
            sell=_field(data, "venta"),
            type=kind,
            date=_optional_field(data, "fecha"),
        )

    @staticmethod
    def _parse_country_risk(data: Any) -> CountryRisk:
        data = _require_object(data)
        return CountryRisk(value=_field(data, "valor"), date=_optional_field(data, "fecha"))

    def _tax_multiplier(self) -> Decimal:
        """
        Parse DOLLAR_TAX_PERCENT into a price multiplier (30 -> 1.30).

        Raises:
            ConfigurationError: If the setting is missing or not a number
        """
        return parse_tax_percent(self.settings.dollar_tax_percent) / 100 + 1

    def _apply_tax(self, quote: DollarQuote) -> DollarQuote:
        """Return ``quote`` with taxes added to its sell price."""
        multiplier = self._tax_multiplier()
        culture = self.get_api_culture()
        sell = parse_decimal(quote.sell, culture)
        if sell is None:
            log.warning("Could not parse %s sell price %r, leaving it unadjusted", quote.type.name, quote.sell)
            return quote
        return replace(quote, sell=format_decimal(sell * multiplier, culture))
