from __future__ import annotations
from typing import Optional, Sequence

from natal_points.services.zodiac import normalize

def locate_house(longitude: float, cusps: Sequence[float]) -> Optional[int]:
    """
    Hausnummer 1..12 anhand der 12 Kuspiden (Index 0 = Haus 1).

    Jedes Haus wird für sich "entrollt": liegt die Endkuspe nicht über der
    Startkuspe, wird sie um 360° verschoben, ebenso die Länge, wenn sie unter
    der Startkuspe liegt. Geprüft wird halboffen [start, end).
    Ohne Treffer (NaN in Länge oder Kuspiden) -> None.
    """
    if cusps is None or len(cusps) != 12:
        raise ValueError("cusps must be a list of 12 floats")
    lon = normalize(longitude)
    for i in range(12):
        start = float(cusps[i])
        end = float(cusps[(i + 1) % 12])
        if end <= start:
            end += 360.0
        x = lon
        if x < start:
            x += 360.0
        if start <= x < end:
            return i + 1
    return None
