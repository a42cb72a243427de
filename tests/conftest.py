import pytest
from fastapi.testclient import TestClient

from natal_points.deps import get_engine
from natal_points.main import app
from natal_points.models.schemas import Houses, RawPosition

EQUAL_CUSPS = [i * 30.0 for i in range(12)]


class FakeEngine:
    """Feste Positionen statt Swiss Ephemeris; zählt die Aufrufe."""

    def __init__(self, positions=None, cusps=None, ascendant=0.0, mc=270.0):
        self.positions = positions or {
            "sun": 100.0,
            "moon": 200.0,
            "jupiter": 95.5,
            "north_node": 321.2,
            "pluto": 227.0,
        }
        self.cusps = cusps or EQUAL_CUSPS
        self.ascendant = ascendant
        self.mc = mc
        self.calls = []

    async def julday(self, year, month, day, ut_hours):
        self.calls.append(("julday", year, month, day, ut_hours))
        return 2447932.5 + ut_hours / 24.0

    async def position(self, jd_ut, body):
        self.calls.append(("position", jd_ut, body))
        return RawPosition(body=body, longitude=self.positions[body], speed_long=0.1)

    async def houses(self, jd_ut, lat, lon, system):
        self.calls.append(("houses", jd_ut, lat, lon, system))
        return Houses(cusps=list(self.cusps), ascendant=self.ascendant, mc=self.mc)


BETHUNE = {
    "year": 1990, "month": 2, "day": 10, "hour": 3, "minute": 30,
    "lat": 50.53, "lon": 2.64, "tz": 1,
}


@pytest.fixture
def fake_engine():
    return FakeEngine()


@pytest.fixture
def client(fake_engine):
    app.dependency_overrides[get_engine] = lambda: fake_engine
    yield TestClient(app)
    app.dependency_overrides.clear()
