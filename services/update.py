"""
Orquestación de la actualización de ad_list.go:
descarga concurrente de las dos fuentes, fusión y escritura.
"""
import logging
import time
from concurrent.futures import ALL_COMPLETED, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Dict, List, Tuple

from api.http_client import fetch_text
from config import (
    AD_LIST_MARKER,
    AD_LIST_PATH,
    NOAA_STATIONS_URL,
    OURAIRPORTS_URL,
    STATIONS_TIMEOUT_SECONDS,
)
from providers.base import StationSource
from providers.registry import get_sources
from providers.types import StationRecord

from .ad_list import write_ad_list
from .reconcile import merge_stations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateConfig:
    primary_url: str = NOAA_STATIONS_URL
    secondary_url: str = OURAIRPORTS_URL
    output_path: str = AD_LIST_PATH
    timeout_s: float = STATIONS_TIMEOUT_SECONDS
    marker: str = AD_LIST_MARKER


@dataclass(frozen=True)
class UpdateResult:
    stations: List[StationRecord]
    elapsed_s: float


def fetch_and_parse(source: StationSource, timeout_s: float) -> Dict[str, StationRecord]:
    text = fetch_text(source.url, timeout_s, encoding=source.encoding)
    return source.parse(text)


def collect_sources(
    primary: StationSource,
    secondary: StationSource,
    timeout_s: float,
) -> Tuple[Dict[str, StationRecord], Dict[str, StationRecord]]:
    """
    Descarga y parsea las dos fuentes en paralelo y espera a ambas.

    Si alguna falla se relanza su error (primero el de `primary`) y el
    resultado de la otra se descarta: todo o nada.
    """
    with ThreadPoolExecutor(max_workers=2) as pool:
        fut_primary = pool.submit(fetch_and_parse, primary, timeout_s)
        fut_secondary = pool.submit(fetch_and_parse, secondary, timeout_s)
        wait([fut_primary, fut_secondary], return_when=ALL_COMPLETED)

    for fut in (fut_primary, fut_secondary):
        error = fut.exception()
        if error is not None:
            raise error

    return fut_primary.result(), fut_secondary.result()


def build_stations(config: UpdateConfig) -> List[StationRecord]:
    """Estaciones fusionadas, sin escribir nada."""
    primary, secondary = get_sources(config.primary_url, config.secondary_url)
    primary_map, secondary_map = collect_sources(primary, secondary, config.timeout_s)
    return merge_stations(primary_map, secondary_map)


def run_update(config: UpdateConfig, dry_run: bool = False) -> UpdateResult:
    """
    Ejecuta la actualización completa.
    Cualquier error se propaga y ad_list.go queda como estaba.
    """
    start = time.perf_counter()
    stations = build_stations(config)
    if not dry_run:
        write_ad_list(config.output_path, stations, marker=config.marker)
    return UpdateResult(stations=stations, elapsed_s=time.perf_counter() - start)
