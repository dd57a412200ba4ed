"""
Domain Models - Pure Business Objects

This module contains the domain models returned to callers:
- Dollar quote kinds
- Normalized dollar quotes
- The country-risk indicator
- Upstream error signals

Files that USE this module:
- dolarbot.adapters.* (the client builds these models)
- dolarbot.application.* (the facade returns and logs them)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from enum import Enum  # Closed set of quote kinds
from typing import Optional  # Type hints for optional values


class DollarType(Enum):
    """Logical dollar quote published by the upstream API."""
    OFICIAL = "oficial"
    AHORRO = "ahorro"  # official price plus taxes
    BLUE = "blue"
    CONTADO_CON_LIQUI = "contado_con_liqui"
    PROMEDIO = "promedio"
    BOLSA = "bolsa"
    NACION = "nacion"
    BBVA = "bbva"
    PIANO = "piano"
    HIPOTECARIO = "hipotecario"
    GALICIA = "galicia"
    SANTANDER = "santander"
    CIUDAD = "ciudad"
    SUPERVIELLE = "supervielle"
    PATAGONIA = "patagonia"
    COMAFI = "comafi"
    BIND = "bind"
    BANCOR = "bancor"
    CHACO = "chaco"
    PAMPA = "pampa"


@dataclass(frozen=True)
class DollarQuote:
    """
    Normalized buy/sell quote for one dollar type.

    Attributes:
        buy: Buy price as published (en-US number text, e.g. '98.25')
        sell: Sell price as published, tax included for AHORRO
        type: The dollar type this quote answers
        date: Upstream timestamp text ('fecha'), if any
    """
    buy: str
    sell: str
    type: DollarType
    date: Optional[str] = None


@dataclass(frozen=True)
class CountryRisk:
    """
    Argentine country-risk indicator (riesgo país).

    Attributes:
        value: Indicator value as published (en-US number text)
        date: Upstream timestamp text ('fecha'), if any
    """
    value: str
    date: Optional[str] = None


@dataclass(frozen=True)
class ApiError:
    """
    Describes a failed upstream call.

    Attributes:
        status_code: HTTP status, or 0 when no response was received
        description: Human-readable status description
        endpoint: Path that was requested
        exception: Underlying transport or decoding exception, if any
    """
    status_code: int
    description: str
    endpoint: str = ""
    exception: Optional[BaseException] = None
