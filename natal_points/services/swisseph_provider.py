# natal_points/services/swisseph_provider.py
from __future__ import annotations

import asyncio
import logging
import threading

from natal_points.config import Settings, NodeType
from natal_points.exceptions import ExternalEngineError
from natal_points.models.schemas import Body, RawPosition, Houses
from natal_points.services.provider import EphemerisEngine

import swisseph as swe

log = logging.getLogger("uvicorn")

# Mapping unserer Körper-Strings auf Swiss Ephemeris Konstanten
_BODY_MAP: dict[str, int] = {
    "sun": swe.SUN,
    "moon": swe.MOON,
    "jupiter": swe.JUPITER,
    "pluto": swe.PLUTO,
}

_NODE_MAP: dict[str, int] = {
    "true": swe.TRUE_NODE,
    "mean": swe.MEAN_NODE,
}

# swe hält Pfad/Dateien pro Thread
_local = threading.local()

def _ensure_ephe_path(path: str | None) -> None:
    """Setzt den Ephemeriden-Pfad im aktuellen Thread, einmal je Thread und Pfad."""
    if path and getattr(_local, "ephe_path", None) != path:
        swe.set_ephe_path(path)
        _local.ephe_path = path
        log.info(f"Swiss Ephemeris path set to: {path}")

def _julday(path: str | None, year: int, month: int, day: int, ut_hours: float) -> float:
    _ensure_ephe_path(path)
    return swe.julday(year, month, day, ut_hours, swe.GREG_CAL)

def _calc(path: str | None, jd_ut: float, ipl: int) -> tuple:
    _ensure_ephe_path(path)
    flags = swe.FLG_SWIEPH | swe.FLG_SPEED  # Swiss Ephemeris + Geschwindigkeiten
    xx, _retflag = swe.calc_ut(jd_ut, ipl, flags)
    return xx

def _houses(path: str | None, jd_ut: float, lat: float, lon: float, hsys: bytes) -> tuple:
    _ensure_ephe_path(path)
    return swe.houses(jd_ut, lat, lon, hsys)

class SwissEphemeris(EphemerisEngine):
    """Ephemeriden-Engine via pyswisseph; jeder Aufruf läuft in einem Worker-Thread."""

    def __init__(self, ephe_path: str | None = None, node_type: NodeType = "true") -> None:
        self._ephe_path = ephe_path
        self._node = _NODE_MAP[node_type]

    @classmethod
    def from_settings(cls, settings: Settings) -> "SwissEphemeris":
        return cls(ephe_path=settings.se_ephe_path, node_type=settings.node_type)

    async def julday(self, year: int, month: int, day: int, ut_hours: float) -> float:
        return await asyncio.to_thread(_julday, self._ephe_path, year, month, day, ut_hours)

    async def position(self, jd_ut: float, body: Body) -> RawPosition:
        ipl = self._node if body == "north_node" else _BODY_MAP[body]
        try:
            xx = await asyncio.to_thread(_calc, self._ephe_path, jd_ut, ipl)
        except swe.Error as e:
            raise ExternalEngineError(f"swe_calc_ut failed for {body}: {e}") from e
        return RawPosition(
            body=body,
            longitude=float(xx[0]),
            latitude=float(xx[1]),
            distance=float(xx[2]),
            speed_long=float(xx[3]),
        )

    async def houses(self, jd_ut: float, lat: float, lon: float, system: str) -> Houses:
        """
        Häuserkuspide + AC/MC.
        pyswisseph erwartet den House-Code als *Byte-String* (z. B. b'P').
        Rückgabeverhalten je nach Version:
          - cusps: 12 Elemente (Index 0..11) ODER 13 Elemente mit Dummy an Index 0 (1..12 gültig)
        """
        hsys = (system or "P")[0].upper().encode("ascii")
        try:
            cusps, ascmc = await asyncio.to_thread(_houses, self._ephe_path, jd_ut, float(lat), float(lon), hsys)
        except swe.Error as e:
            raise ExternalEngineError(f"swe_houses failed: {e}") from e

        if not isinstance(cusps, (list, tuple)) or not isinstance(ascmc, (list, tuple)) or len(ascmc) < 2:
            raise ExternalEngineError("swe_houses failed")

        n = len(cusps)
        if n >= 13:
            cusps_list = [float(cusps[i]) for i in range(1, 13)]  # 1..12
        elif n == 12:
            cusps_list = [float(c) for c in cusps]               # 0..11
        else:
            raise ExternalEngineError(f"swe_houses failed: unexpected cusps length {n}")

        return Houses(cusps=cusps_list, ascendant=float(ascmc[0]), mc=float(ascmc[1]))
