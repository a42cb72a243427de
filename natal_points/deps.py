from fastapi import Depends
from natal_points.config import Settings, get_settings
from natal_points.services.provider import EphemerisEngine
from natal_points.services.swisseph_provider import SwissEphemeris

def get_engine(settings: Settings = Depends(get_settings)) -> EphemerisEngine:
    # pro Request neu; die Engine hält keinen Zustand
    return SwissEphemeris.from_settings(settings)
