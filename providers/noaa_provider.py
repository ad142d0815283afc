"""
Fuente NOAA (aviationweather.gov stations.txt), formato de columnas fijas.
"""
import logging
from typing import Dict

from config import (
    NOAA_COUNTRY_SLICE,
    NOAA_ICAO_SLICE,
    NOAA_LAT_SLICE,
    NOAA_LINE_LENGTH,
    NOAA_LON_SLICE,
    NOAA_METAR_FLAG,
    NOAA_METAR_FLAG_COL,
    NOAA_NAME_SLICE,
    NOAA_STATIONS_URL,
)
from utils.helpers import deg2dec, has_valid_coords

from .base import SourceFormatError
from .types import StationRecord

logger = logging.getLogger(__name__)


def parse_noaa_stations(text: str, source: str = NOAA_STATIONS_URL) -> Dict[str, StationRecord]:
    """
    Extrae las estaciones METAR del listado NOAA.

    Solo se conservan líneas de longitud exacta, marcadas como METAR ("X")
    y con código ICAO. Títulos, pies y estaciones sin METAR se ignoran.
    El código IATA de este fichero es en realidad el código FAA: no se usa.
    """
    stations: Dict[str, StationRecord] = {}
    no_coords = 0

    for line in text.split("\n"):
        line = line.rstrip("\r")
        if len(line) != NOAA_LINE_LENGTH:
            continue
        if line[NOAA_METAR_FLAG_COL] != NOAA_METAR_FLAG:
            continue
        icao = line[NOAA_ICAO_SLICE].strip().upper()
        if not icao:
            continue

        # 999.0 si no se puede convertir, pero la estación se conserva
        lat, lon = deg2dec(line[NOAA_LAT_SLICE], line[NOAA_LON_SLICE])
        if not has_valid_coords(lat, lon):
            no_coords += 1

        stations[icao] = StationRecord(
            icao=icao,
            name=line[NOAA_NAME_SLICE].strip(),
            iata="",
            country=line[NOAA_COUNTRY_SLICE].strip(),
            lat=lat,
            lon=lon,
        )

    if not stations:
        raise SourceFormatError(source, "Ningún registro válido encontrado.")

    if no_coords:
        logger.warning(f"NOAA: {no_coords} estaciones sin coordenadas válidas")
    logger.info(f"NOAA: {len(stations)} estaciones METAR")
    return stations


class NoaaProvider:
    provider_id = "NOAA"
    provider_name = "NOAA aviationweather.gov"

    # latin-1: un byte por carácter, las columnas fijas se cuentan en bytes
    def __init__(self, url: str = NOAA_STATIONS_URL, encoding: str = "latin-1"):
        self.url = url
        self.encoding = encoding

    def parse(self, text: str) -> Dict[str, StationRecord]:
        return parse_noaa_stations(text, source=self.url)
