"""
Tipos de dominio para el registro de estaciones METAR.
"""
from dataclasses import dataclass

from utils.helpers import has_valid_coords


@dataclass(frozen=True)
class StationRecord:
    """Estación normalizada, independiente de la fuente."""
    icao: str
    name: str
    iata: str
    country: str
    lat: float
    lon: float

    @property
    def has_position(self) -> bool:
        """False si las coordenadas son el centinela 999.0"""
        return has_valid_coords(self.lat, self.lon)
