"""
Funciones auxiliares generales
"""
import math
from typing import Tuple

from config import INVALID_COORD


def has_valid_coords(lat: float, lon: float) -> bool:
    """Indica si el par (lat, lon) no es el centinela de coordenada inválida"""
    return not (lat == INVALID_COORD and lon == INVALID_COORD)


def is_finite_number(x) -> bool:
    """Verifica que un valor sea numérico, no NaN y no infinito"""
    if x is None:
        return False
    try:
        return math.isfinite(float(x))
    except (TypeError, ValueError):
        return False


def deg2dec(lat: str, lon: str) -> Tuple[float, float]:
    """
    Convierte coordenadas grado/minuto a decimal

    Ejemplo: "61 10N", "150 30W" -> (61.167, -150.5)

    Args:
        lat: Texto "DD MMH" (H = N/S)
        lon: Texto "DDD MMH" (H = E/W)

    Returns:
        Tupla (lat, lon) en grados decimales, o (999.0, 999.0) si algún
        grado o minuto no es numérico. Nunca devuelve un eje válido y otro no.
    """
    try:
        lat_d = int(lat[0:2])
        lat_m = int(lat[3:5])
        lon_d = int(lon[0:3])
        lon_m = int(lon[4:6])
    except ValueError:
        return INVALID_COORD, INVALID_COORD

    lt = lat_d + lat_m / 60
    lg = lon_d + lon_m / 60

    if lat[5:6] == "S":
        lt *= -1
    if lon[6:7] == "W":
        lg *= -1
    return lt, lg
