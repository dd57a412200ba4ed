# src/dolarbot/adapters/providers/endpoints.py
"""
Endpoint Registry for the api-dolar-argentina Service

Maps every DollarType to the upstream path that serves it. Several types
may share a path: AHORRO reads the official quote and only differs in
post-processing.

Files that USE this module:
- dolarbot.adapters.providers.dolar_argentina (resolves request paths)
- tests.test_endpoints (unit tests)

Files that this module USES:
- dolarbot.domain.models (DollarType enumeration)
"""
from types import MappingProxyType
from typing import Mapping

from dolarbot.domain.models import DollarType

DOLAR_OFICIAL_ENDPOINT = "/api/dolaroficial"
DOLAR_BLUE_ENDPOINT = "/api/dolarblue"
DOLAR_CONTADO_LIQUI_ENDPOINT = "/api/contadoliqui"
DOLAR_PROMEDIO_ENDPOINT = "/api/dolarpromedio"
DOLAR_BOLSA_ENDPOINT = "/api/dolarbolsa"

RIESGO_PAIS_ENDPOINT = "/api/riesgopais"
RIESGO_PAIS_CACHE_KEY = "RiesgoPais"

ENDPOINTS: Mapping[DollarType, str] = MappingProxyType({
    DollarType.OFICIAL: DOLAR_OFICIAL_ENDPOINT,
    DollarType.AHORRO: DOLAR_OFICIAL_ENDPOINT,
    DollarType.BLUE: DOLAR_BLUE_ENDPOINT,
    DollarType.CONTADO_CON_LIQUI: DOLAR_CONTADO_LIQUI_ENDPOINT,
    DollarType.PROMEDIO: DOLAR_PROMEDIO_ENDPOINT,
    DollarType.BOLSA: DOLAR_BOLSA_ENDPOINT,
    DollarType.NACION: "/api/nacion",
    DollarType.BBVA: "/api/bbva",
    DollarType.PIANO: "/api/piano",
    DollarType.HIPOTECARIO: "/api/hipotecario",
    DollarType.GALICIA: "/api/galicia",
    DollarType.SANTANDER: "/api/santander",
    DollarType.CIUDAD: "/api/ciudad",
    DollarType.SUPERVIELLE: "/api/supervielle",
    DollarType.PATAGONIA: "/api/patagonia",
    DollarType.COMAFI: "/api/comafi",
    DollarType.BIND: "/api/bind",
    DollarType.BANCOR: "/api/bancor",
    DollarType.CHACO: "/api/chaco",
    DollarType.PAMPA: "/api/pampa",
})

_missing = set(DollarType) - set(ENDPOINTS)
if _missing:
    raise RuntimeError(f"No endpoint registered for: {sorted(t.name for t in _missing)}")


def path_for(kind: DollarType) -> str:
    """Return the upstream path serving ``kind``."""
    return ENDPOINTS[kind]
