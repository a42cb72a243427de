# natal_points/services/chart.py
from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from natal_points.exceptions import ExternalEngineError
from natal_points.models.schemas import (
    BirthMoment, ChartResult, FortunePosition, Houses, HousedPosition,
)
from natal_points.services.houses import locate_house
from natal_points.services.provider import EphemerisEngine
from natal_points.services.sect import compute_sect
from natal_points.services.zodiac import resolve_sign

log = logging.getLogger("uvicorn")

BODIES = ("sun", "moon", "jupiter", "north_node", "pluto")

def _housed(longitude: float, cusps: Sequence[float]) -> HousedPosition:
    house = locate_house(longitude, cusps)
    if house is None:
        log.warning(f"No house found for longitude {longitude} (cusps={list(cusps)})")
    return HousedPosition(**resolve_sign(longitude).model_dump(), house=house)

async def assemble_chart(moment: BirthMoment, engine: EphemerisEngine, house_system: str = "P") -> ChartResult:
    """
    Jupiter, wahrer Mondknoten, Pluto, Glückspunkt und MC für einen Geburtsmoment.
    Entweder vollständiges Ergebnis oder Exception, nie ein Teilergebnis.
    """
    jd = await engine.julday(moment.year, moment.month, moment.day, moment.ut_hours)

    sun, moon, jupiter, node, pluto = await asyncio.gather(
        *(engine.position(jd, body) for body in BODIES)
    )

    houses = await engine.houses(jd, moment.lat, moment.lon, house_system)
    if not isinstance(houses, Houses):
        raise ExternalEngineError("swe_houses failed")
    cusps = houses.cusps

    sect = compute_sect(sun.longitude, moon.longitude, houses.ascendant, cusps)
    fortune = _housed(sect.fortune_longitude, cusps)

    return ChartResult(
        jupiter=_housed(jupiter.longitude, cusps),
        north_node=_housed(node.longitude, cusps),
        pluto=_housed(pluto.longitude, cusps),
        part_of_fortune=FortunePosition(**fortune.model_dump(), sect=sect.sect),
        mc=resolve_sign(houses.mc),
    )
