# natal_points/models/schemas.py
from __future__ import annotations
from typing import Literal, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

Body = Literal["sun","moon","jupiter","north_node","pluto"]

Sign = Literal[
    "Aries","Taurus","Gemini","Cancer","Leo","Virgo",
    "Libra","Scorpio","Sagittarius","Capricorn","Aquarius","Pisces"
]

Sect = Literal["day","night"]

# Reihenfolge = Prüfreihenfolge der Pflichtfelder
BIRTH_FIELDS = ("year","month","day","hour","minute","lat","lon","tz")

class BirthMoment(BaseModel):
    """Geburtsdaten in Ortszeit; tz = Versatz zu UTC in Stunden (MEZ = +1, MESZ = +2)."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    year: int
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)
    hour: float = Field(..., ge=0, lt=24)
    minute: float = Field(..., ge=0, lt=60)
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    tz: float

    @field_validator("year", "month", "day", mode="before")
    @classmethod
    def whole_number_string(cls, v):
        """Dezimalstring "1990.0" wie 1990 behandeln; "1990.5" bleibt ungültig."""
        if isinstance(v, str):
            try:
                f = float(v)
            except ValueError:
                return v
            if f.is_integer():
                return int(f)
        return v

    @property
    def ut_hours(self) -> float:
        """UT = Ortszeit - tz, als Dezimalstunden (darf < 0 oder >= 24 werden)."""
        return (self.hour + self.minute / 60.0) - self.tz

class RawPosition(BaseModel):
    body: Body
    longitude: float
    latitude: Optional[float] = None
    distance: Optional[float] = None
    speed_long: Optional[float] = None

class Houses(BaseModel):
    cusps: List[float] = Field(..., min_length=12, max_length=12)  # Index 0 = Haus 1
    ascendant: float
    mc: float

class SectResult(BaseModel):
    is_day_chart: bool
    fortune_longitude: float

    @property
    def sect(self) -> Sect:
        return "day" if self.is_day_chart else "night"

class CelestialPosition(BaseModel):
    longitude: float
    sign: Sign
    degrees: float = Field(..., ge=0.0, lt=30.0)

class HousedPosition(CelestialPosition):
    house: Optional[int] = Field(None, ge=1, le=12)  # None = nicht bestimmbar

class FortunePosition(HousedPosition):
    sect: Sect

class ChartResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    jupiter: HousedPosition
    north_node: HousedPosition = Field(..., alias="northNode")
    pluto: HousedPosition
    part_of_fortune: FortunePosition = Field(..., alias="partOfFortune")
    mc: CelestialPosition

class ErrorResponse(BaseModel):
    error: str
