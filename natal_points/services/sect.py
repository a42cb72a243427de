from __future__ import annotations
from typing import Sequence

from natal_points.models.schemas import SectResult
from natal_points.services.houses import locate_house
from natal_points.services.zodiac import normalize

DAY_HOUSES = range(7, 13)  # Sonne über dem Horizont

def compute_sect(sun: float, moon: float, ascendant: float, cusps: Sequence[float]) -> SectResult:
    """
    Tag-/Nachthoroskop und Glückspunkt (Pars Fortunae).
      Tag:   ASC + Mond - Sonne
      Nacht: ASC - Mond + Sonne
    Entscheidend ist das Haus der Sonne; ohne bestimmbares Haus gilt Nacht.
    """
    sun_house = locate_house(sun, cusps)
    is_day = sun_house in DAY_HOUSES
    if is_day:
        fortune = normalize(ascendant + moon - sun)
    else:
        fortune = normalize(ascendant - moon + sun)
    return SectResult(is_day_chart=is_day, fortune_longitude=fortune)
