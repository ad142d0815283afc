"""
Capa de acceso a las fuentes de estaciones.
"""
from .base import SourceFormatError, StationSource
from .noaa_provider import NoaaProvider, parse_noaa_stations
from .ourairports_provider import OurAirportsProvider, parse_ourairports_csv
from .registry import get_sources
from .types import StationRecord

__all__ = [
    "NoaaProvider",
    "OurAirportsProvider",
    "SourceFormatError",
    "StationRecord",
    "StationSource",
    "get_sources",
    "parse_noaa_stations",
    "parse_ourairports_csv",
]
