"""
Módulo de servicios: fusión de fuentes y escritura de ad_list.go
"""
from .ad_list import (
    RegistryFileError,
    format_station,
    render_records,
    sort_stations,
    write_ad_list,
)
from .reconcile import merge_stations
from .update import (
    UpdateConfig,
    UpdateResult,
    build_stations,
    collect_sources,
    fetch_and_parse,
    run_update,
)

__all__ = [
    'RegistryFileError',
    'format_station',
    'render_records',
    'sort_stations',
    'write_ad_list',
    'merge_stations',
    'UpdateConfig',
    'UpdateResult',
    'build_stations',
    'collect_sources',
    'fetch_and_parse',
    'run_update',
]
