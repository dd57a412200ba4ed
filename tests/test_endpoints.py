"""
Endpoint Registry Tests

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- dolarbot.adapters.providers.endpoints (ENDPOINTS and path_for)
"""
import pytest

from dolarbot.adapters.providers.endpoints import (
    ENDPOINTS,
    RIESGO_PAIS_CACHE_KEY,
    RIESGO_PAIS_ENDPOINT,
    path_for,
)
from dolarbot.domain.models import DollarType


class TestEndpoints:
    @pytest.mark.parametrize("kind", list(DollarType))
    def test_every_type_has_a_path(self, kind):
        path = path_for(kind)
        assert path.startswith("/api/")
        assert len(path) > len("/api/")

    def test_ahorro_aliases_oficial(self):
        assert path_for(DollarType.AHORRO) == path_for(DollarType.OFICIAL) == "/api/dolaroficial"

    def test_known_paths(self):
        assert path_for(DollarType.BLUE) == "/api/dolarblue"
        assert path_for(DollarType.CONTADO_CON_LIQUI) == "/api/contadoliqui"
        assert path_for(DollarType.PAMPA) == "/api/pampa"

    def test_only_ahorro_shares_a_path(self):
        paths = list(ENDPOINTS.values())
        assert len(paths) - len(set(paths)) == 1

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            ENDPOINTS[DollarType.BLUE] = "/api/other"

    def test_country_risk_constants(self):
        assert RIESGO_PAIS_ENDPOINT == "/api/riesgopais"
        assert RIESGO_PAIS_CACHE_KEY not in set(DollarType)
