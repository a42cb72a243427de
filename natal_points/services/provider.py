from typing import Protocol
from natal_points.models.schemas import Body, RawPosition, Houses

class EphemerisEngine(Protocol):
    async def julday(self, year: int, month: int, day: int, ut_hours: float) -> float: ...
    async def position(self, jd_ut: float, body: Body) -> RawPosition: ...
    async def houses(self, jd_ut: float, lat: float, lon: float, system: str) -> Houses: ...
