"""
Contrato base para fuentes de estaciones.
"""
from typing import Dict, Protocol

from .types import StationRecord


class SourceFormatError(Exception):
    """La fuente no tiene el formato esperado (0 registros, columnas incorrectas...)."""

    def __init__(self, source: str, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"{source}: fichero no válido. {detail}")


class StationSource(Protocol):
    """Interfaz común para las fuentes que alimentan el registro."""
    provider_id: str
    provider_name: str
    url: str
    encoding: str

    def parse(self, text: str) -> Dict[str, StationRecord]:
        """Devuelve el mapa icao -> estación para el texto descargado."""
        ...
