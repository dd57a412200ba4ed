# src/dolarbot/shared/validators.py
"""
Input Validation Utilities - Configuration Validation

Validation helpers for configuration values, so that a bad deployment
fails before any request reaches the upstream API.

Files that USE this module:
- dolarbot.config.settings (uses validate_api_url in Settings field validators)
- dolarbot.adapters.providers.dolar_argentina (parse_tax_percent for AHORRO quotes)
- dolarbot.app (parse_tax_percent as a startup check)

Files that this module USES:
- dolarbot.domain.errors (ConfigurationError)
"""
import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from dolarbot.domain.errors import ConfigurationError


def validate_api_url(url: str) -> bool:
    """
    Validate an upstream base URL.

    Args:
        url: Base URL to validate (e.g. https://api-dolar-argentina.herokuapp.com)

    Returns:
        True if valid, False otherwise
    """
    if not url:
        return False

    # Scheme, host and an optional path; no query string or fragment
    pattern = r'^https?://[^\s/?#]+(/[^\s?#]*)?$'
    return bool(re.match(pattern, url.strip()))


def parse_tax_percent(raw: Optional[str]) -> Decimal:
    """
    Parse the DOLLAR_TAX_PERCENT setting.

    Args:
        raw: Setting value as text (e.g. '30' or '21.5')

    Returns:
        The percentage as a Decimal (30 for '30')

    Raises:
        ConfigurationError: If the value is missing, not a finite number or negative
    """
    if raw is None or not raw.strip():
        raise ConfigurationError("DOLLAR_TAX_PERCENT is required for AHORRO quotes")
    text = raw.strip()
    if "_" in text:
        raise ConfigurationError(f"DOLLAR_TAX_PERCENT is not a number: {raw!r}")
    try:
        percent = Decimal(text)
    except InvalidOperation as e:
        raise ConfigurationError(f"DOLLAR_TAX_PERCENT is not a number: {raw!r}") from e
    if not percent.is_finite():
        raise ConfigurationError(f"DOLLAR_TAX_PERCENT is not a number: {raw!r}")
    if percent < 0:
        raise ConfigurationError(f"DOLLAR_TAX_PERCENT must not be negative: {raw!r}")
    return percent
