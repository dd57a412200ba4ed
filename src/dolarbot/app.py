# src/dolarbot/app.py
"""
Application Entry Point - Quote Snapshot

Composition root for the package. It configures logging, builds ApiCalls
and logs a snapshot of every dollar quote plus the country risk.

Files that USE this module:
- dolarbot.__main__ (python -m dolarbot)
- tests.test_app (unit tests)

Files that this module USES:
- dolarbot.shared.logging_conf (setup_logging for logging configuration)
- dolarbot.shared.validators (parse_tax_percent as a startup check)
- dolarbot.config (settings for configuration management)
- dolarbot.application.api_calls (ApiCalls facade)
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Dict, List, Optional, Tuple

from dolarbot.application.api_calls import ApiCalls
from dolarbot.config import Settings
from dolarbot.domain.errors import ConfigurationError
from dolarbot.domain.models import CountryRisk, DollarQuote, DollarType
from dolarbot.shared.logging_conf import setup_logging
from dolarbot.shared.validators import parse_tax_percent

log = logging.getLogger(__name__)


def select_kinds(settings: Settings) -> List[DollarType]:
    """
    Pick the dollar types that can be queried with the current settings.

    AHORRO needs DOLLAR_TAX_PERCENT; it is skipped when the value is unset.

    Raises:
        ConfigurationError: If DOLLAR_TAX_PERCENT is set but malformed
    """
    kinds = list(DollarType)
    tax = settings.dollar_tax_percent
    if tax is None or not tax.strip():
        log.warning("DOLLAR_TAX_PERCENT not set, skipping %s", DollarType.AHORRO.name)
        kinds.remove(DollarType.AHORRO)
    else:
        parse_tax_percent(tax)
    return kinds


async def snapshot(
    api: ApiCalls, kinds: List[DollarType]
) -> Tuple[Dict[DollarType, Optional[DollarQuote]], Optional[CountryRisk]]:
    """Fetch the given quotes and the country risk concurrently."""
    quotes, risk = await asyncio.gather(api.fetch_quotes(kinds), api.fetch_indicator())
    return quotes, risk


def main() -> int:
    """
    Log a snapshot of every quote.

    Returns:
        Process exit code (0 on success, 2 on configuration errors)
    """
    from dolarbot.config import settings

    setup_logging(
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    log.info("Using API at %s (cache ttl=%sm)", settings.api_url, settings.cache_minutes)

    try:
        kinds = select_kinds(settings)
        api = ApiCalls(settings)
        quotes, risk = asyncio.run(snapshot(api, kinds))
    except ConfigurationError as e:
        log.critical("Configuration error: %s", e)
        return 2

    for kind, quote in quotes.items():
        if quote is None:
            log.info("%-18s unavailable", kind.name)
        else:
            log.info("%-18s buy=%s sell=%s", kind.name, quote.buy, quote.sell)
    log.info("%-18s %s", "RIESGO_PAIS", risk.value if risk else "unavailable")
    return 0


if __name__ == "__main__":
    sys.exit(main())
