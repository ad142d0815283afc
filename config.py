"""
Configuración global del actualizador de estaciones METAR
"""
import os

# ============================================================
# FUENTES DE DATOS
# ============================================================
NOAA_STATIONS_URL = os.getenv(
    "NOAA_STATIONS_URL", "https://aviationweather.gov/docs/metar/stations.txt"
)
OURAIRPORTS_URL = os.getenv(
    "OURAIRPORTS_URL", "https://davidmegginson.github.io/ourairports-data/airports.csv"
)
STATIONS_TIMEOUT_SECONDS = float(os.getenv("STATIONS_TIMEOUT_SECONDS", "5"))

# ============================================================
# FICHERO DE SALIDA (ad_list.go)
# ============================================================
AD_LIST_PATH = os.getenv("AD_LIST_PATH", "data/ad_list.go")
AD_LIST_MARKER = "var AdList"  # No cambiar la declaración en ad_list.go
AD_LIST_CLOSING = "}"
FIELD_SEPARATOR = ";"
COORD_DECIMALS = 3

# ============================================================
# COORDENADAS
# ============================================================
INVALID_COORD = 999.0  # Centinela: coordenada desconocida o no parseable

# ============================================================
# FORMATO NOAA stations.txt (columnas fijas, base 0)
# ============================================================
NOAA_LINE_LENGTH = 83
NOAA_NAME_SLICE = slice(3, 20)
NOAA_ICAO_SLICE = slice(20, 24)
NOAA_LAT_SLICE = slice(39, 46)
NOAA_LON_SLICE = slice(47, 55)
NOAA_METAR_FLAG_COL = 62
NOAA_METAR_FLAG = "X"
NOAA_COUNTRY_SLICE = slice(81, 83)

# ============================================================
# FORMATO OURAIRPORTS airports.csv (ordinal de columna)
# ============================================================
OURAIRPORTS_FIELDS = int(os.getenv("OURAIRPORTS_FIELDS", "18"))
OA_COL_ICAO = 1
OA_COL_NAME = 3
OA_COL_LAT = 4
OA_COL_LON = 5
OA_COL_COUNTRY = 8
OA_COL_MUNICIPALITY = 10
OA_COL_IATA = 13
