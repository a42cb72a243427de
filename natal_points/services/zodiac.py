from __future__ import annotations
import math

from natal_points.models.schemas import CelestialPosition

ZODIAC = ["Aries","Taurus","Gemini","Cancer","Leo","Virgo","Libra","Scorpio","Sagittarius","Capricorn","Aquarius","Pisces"]

def normalize(x: float) -> float:
    """Winkel auf [0, 360) reduzieren; -10 -> 350."""
    v = float(x) % 360.0
    # -1e-15 % 360 ergibt 360.0
    return 0.0 if v >= 360.0 else v

def sign_index(longitude: float) -> int:
    """Zeichenindex 0..11 (Aries = 0) der normierten Länge."""
    lon = normalize(longitude)
    idx = int(math.floor(lon / 30.0))
    # lon/30 kann knapp unter einer Grenze auf die nächste Ganzzahl runden
    if lon - idx * 30.0 < 0.0:
        idx -= 1
    return idx

def resolve_sign(longitude: float) -> CelestialPosition:
    """Zeichen und Grad im Zeichen; `longitude` bleibt der übergebene Wert."""
    lon = normalize(longitude)
    idx = sign_index(lon)
    return CelestialPosition(
        longitude=float(longitude),
        sign=ZODIAC[idx],
        degrees=lon - idx * 30.0,
    )
