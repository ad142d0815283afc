"""
Registro de fuentes de estaciones.
"""
from typing import Optional, Tuple

from config import NOAA_STATIONS_URL, OURAIRPORTS_URL

from .noaa_provider import NoaaProvider
from .ourairports_provider import OurAirportsProvider


def get_sources(
    primary_url: Optional[str] = None,
    secondary_url: Optional[str] = None,
) -> Tuple[NoaaProvider, OurAirportsProvider]:
    """
    Devuelve (fuente principal, fuente secundaria).
    NOAA decide qué estaciones existen; OurAirports aporta nombres y códigos.
    """
    return (
        NoaaProvider(url=primary_url or NOAA_STATIONS_URL),
        OurAirportsProvider(url=secondary_url or OURAIRPORTS_URL),
    )
