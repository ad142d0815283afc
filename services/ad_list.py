"""
Escritura del listado de estaciones en ad_list.go.

El fichero tiene un preámbulo editable, una línea marcador (`var AdList`)
y a continuación los registros. Todo lo anterior al marcador se conserva;
todo lo posterior se reemplaza.
"""
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Union

from config import AD_LIST_CLOSING, AD_LIST_MARKER, COORD_DECIMALS, FIELD_SEPARATOR
from providers.types import StationRecord

logger = logging.getLogger(__name__)


class RegistryFileError(Exception):
    """Fallo leyendo o escribiendo ad_list.go. El fichero original no se modifica."""

    def __init__(self, path: Union[str, Path], detail: str):
        self.path = str(path)
        self.detail = detail
        super().__init__(f"{self.path}: {detail}")


def sort_stations(stations: Iterable[StationRecord]) -> List[StationRecord]:
    return sorted(stations, key=lambda s: s.icao)


def format_station(station: StationRecord) -> str:
    """Una línea de ad_list.go: `"ICAO;IATA;NOMBRE;PAIS;LAT;LON",` con tabulador"""
    fields = [
        station.icao,
        station.iata,
        station.name,
        station.country,
        f"{station.lat:.{COORD_DECIMALS}f}",
        f"{station.lon:.{COORD_DECIMALS}f}",
    ]
    return f'\t"{FIELD_SEPARATOR.join(fields)}",'


def render_records(stations: Iterable[StationRecord]) -> str:
    """Sección de datos completa: registros ordenados y cierre `}`."""
    lines = [format_station(s) for s in sort_stations(stations)]
    lines.append(AD_LIST_CLOSING)
    return "\n".join(lines) + "\n"


def _split_preamble(content: str, marker: str) -> Optional[str]:
    """Devuelve el contenido hasta la línea marcador incluida (o None si no está)."""
    offset = 0
    for line in content.splitlines(keepends=True):
        offset += len(line)
        if marker in line:
            preamble = content[:offset]
            if not preamble.endswith("\n"):
                preamble += "\n"
            return preamble
    return None


def _atomic_write_text(path: Path, text: str) -> None:
    with tempfile.NamedTemporaryFile(
        mode="w", encoding="utf-8", newline="", delete=False, dir=path.parent, suffix=".tmp"
    ) as tmp:
        tmp_path = Path(tmp.name)
        try:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        except BaseException:
            tmp.close()
            tmp_path.unlink()
            raise
    try:
        shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except BaseException:
        if tmp_path.exists():
            tmp_path.unlink()
        raise


def write_ad_list(
    path: Union[str, Path],
    stations: Iterable[StationRecord],
    marker: str = AD_LIST_MARKER,
) -> int:
    """
    Reemplaza la sección de datos de `path` por `stations`.

    Returns:
        Número de registros escritos
    """
    path = Path(path)
    stations = list(stations)

    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise RegistryFileError(path, f"no se puede leer ({e})") from e

    preamble = _split_preamble(content, marker)
    if preamble is None:
        raise RegistryFileError(path, f"línea marcador '{marker}' no encontrada")

    try:
        _atomic_write_text(path, preamble + render_records(stations))
    except OSError as e:
        raise RegistryFileError(path, f"no se puede escribir ({e})") from e

    logger.info(f"{len(stations)} registros escritos en {path}")
    return len(stations)
