"""Exceptions der Natal-Points-API."""


class ChartAPIException(Exception):
    """Basisklasse aller API-Fehler."""
    status_code = 500


class MissingFieldError(ChartAPIException):
    """Pflichtfeld fehlt in Query oder Body."""
    status_code = 400

    def __init__(self, source: str, field: str) -> None:
        self.field = field
        super().__init__(f"Missing {source}: {field}")


class InvalidFieldError(ChartAPIException):
    """Feld vorhanden, aber nicht als Zahl lesbar oder außerhalb des Wertebereichs."""
    status_code = 400

    def __init__(self, source: str, field: str) -> None:
        self.field = field
        super().__init__(f"Invalid {source}: {field}")


class ExternalEngineError(ChartAPIException):
    """Swiss Ephemeris hat einen Fehler oder unbrauchbare Daten geliefert."""
    status_code = 500
