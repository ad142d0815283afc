"""
Fusión de las estaciones NOAA con los datos de OurAirports.
"""
import logging
from dataclasses import replace
from typing import Dict, List

from providers.types import StationRecord

logger = logging.getLogger(__name__)


def merge_stations(
    primary: Dict[str, StationRecord],
    secondary: Dict[str, StationRecord],
) -> List[StationRecord]:
    """
    Una estación por cada ICAO de `primary`.

    Si `secondary` tiene la estación, se usan sus datos (nombre, IATA, país);
    si además sus coordenadas son el centinela, se toman las de `primary`
    (aunque también sean el centinela). Los ICAO que solo están en
    `secondary` no aparecen. El orden no está definido.
    """
    merged: List[StationRecord] = []
    matched = 0
    fallback = 0

    for icao, p_station in primary.items():
        s_station = secondary.get(icao)
        if s_station is None:
            merged.append(p_station)
            continue

        matched += 1
        if not s_station.has_position:
            fallback += 1
            s_station = replace(s_station, lat=p_station.lat, lon=p_station.lon)
        merged.append(s_station)

    logger.debug(
        f"Fusión: {len(merged)} estaciones, {matched} con datos OurAirports, "
        f"{fallback} con coordenadas NOAA"
    )
    return merged
