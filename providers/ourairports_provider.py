"""
Fuente OurAirports (airports.csv).
"""
import csv
import io
import logging
from typing import Dict, List

import pandas as pd

from config import (
    INVALID_COORD,
    OA_COL_COUNTRY,
    OA_COL_IATA,
    OA_COL_ICAO,
    OA_COL_LAT,
    OA_COL_LON,
    OA_COL_MUNICIPALITY,
    OA_COL_NAME,
    OURAIRPORTS_FIELDS,
    OURAIRPORTS_URL,
)
from utils.helpers import is_finite_number

from .base import SourceFormatError
from .types import StationRecord

logger = logging.getLogger(__name__)


def _read_rows(text: str, source: str, fields_per_record: int) -> List[List[str]]:
    """Lee el CSV completo exigiendo el mismo número de campos en todas las filas."""
    rows = []
    reader = csv.reader(io.StringIO(text))
    try:
        for row in reader:
            if not row:
                continue
            if len(row) != fields_per_record:
                raise SourceFormatError(
                    source,
                    f"Línea {reader.line_num}: se esperaban {fields_per_record} campos, hay {len(row)}",
                )
            rows.append(row)
    except csv.Error as e:
        raise SourceFormatError(source, f"CSV mal formado: {e}") from e
    return rows


def parse_ourairports_csv(
    text: str,
    source: str = OURAIRPORTS_URL,
    fields_per_record: int = OURAIRPORTS_FIELDS,
) -> Dict[str, StationRecord]:
    """
    Convierte airports.csv en un mapa icao -> estación.

    Un número de campos incorrecto en cualquier fila invalida todo el fichero.
    Una coordenada no numérica no descarta la fila: lat y lon pasan a 999.0.
    """
    rows = _read_rows(text, source, fields_per_record)
    data = rows[1:]  # cabecera fuera
    if not data:
        raise SourceFormatError(source, "Ningún registro válido encontrado.")

    frame = pd.DataFrame(data)
    lats = pd.to_numeric(frame[OA_COL_LAT], errors="coerce")
    lons = pd.to_numeric(frame[OA_COL_LON], errors="coerce")

    stations: Dict[str, StationRecord] = {}
    no_coords = 0

    for row, lat, lon in zip(data, lats, lons):
        if is_finite_number(lat) and is_finite_number(lon):
            lat, lon = float(lat), float(lon)
        else:
            lat, lon = INVALID_COORD, INVALID_COORD
            no_coords += 1

        # quitar posibles `"` residuales en el nombre
        name = row[OA_COL_NAME].replace('"', "")
        municipality = row[OA_COL_MUNICIPALITY]
        if municipality:
            name = f"{name} ({municipality})"

        icao = row[OA_COL_ICAO].strip().upper()
        stations[icao] = StationRecord(
            icao=icao,
            name=name,
            iata=row[OA_COL_IATA],
            country=row[OA_COL_COUNTRY],
            lat=lat,
            lon=lon,
        )

    if no_coords:
        logger.warning(f"OurAirports: {no_coords} filas con coordenadas no válidas")
    logger.info(f"OurAirports: {len(stations)} aeropuertos")
    return stations


class OurAirportsProvider:
    provider_id = "OURAIRPORTS"
    provider_name = "OurAirports"

    def __init__(
        self,
        url: str = OURAIRPORTS_URL,
        encoding: str = "utf-8",
        fields_per_record: int = OURAIRPORTS_FIELDS,
    ):
        self.url = url
        self.encoding = encoding
        self.fields_per_record = fields_per_record

    def parse(self, text: str) -> Dict[str, StationRecord]:
        return parse_ourairports_csv(text, source=self.url, fields_per_record=self.fields_per_record)
