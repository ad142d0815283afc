import csv
import io

import pytest

OA_HEADER = [
    "id", "ident", "type", "name", "latitude_deg", "longitude_deg", "elevation_ft",
    "continent", "iso_country", "iso_region", "municipality", "scheduled_service",
    "gps_code", "iata_code", "local_code", "home_link", "wikipedia_link", "keywords",
]


def _noaa_line(name="ANCHORAGE INTL", icao="PANC", lat="61 10N", lon="150 01W",
               flag="X", country="US", length=83):
    chars = [" "] * 83

    def put(start, text):
        chars[start:start + len(text)] = list(text)

    put(0, "AK")
    put(3, name[:17])
    put(20, icao)
    put(39, lat)
    put(47, lon)
    put(62, flag)
    put(81, country)
    line = "".join(chars)
    if length <= 83:
        return line[:length]
    return line + " " * (length - 83)


def _oa_row(ident, name="Some Airport", lat="10.0", lon="20.0", country="US",
            municipality="", iata=""):
    row = [""] * len(OA_HEADER)
    row[0] = "1"
    row[1] = ident
    row[2] = "large_airport"
    row[3] = name
    row[4] = lat
    row[5] = lon
    row[8] = country
    row[10] = municipality
    row[13] = iata
    return row


def _oa_csv(*rows, header=OA_HEADER):
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(header)
    for row in rows:
        writer.writerow(row)
    return buf.getvalue().rstrip("\n")


@pytest.fixture
def noaa_line():
    """Construye una línea de stations.txt con las columnas en su sitio."""
    return _noaa_line


@pytest.fixture
def oa_row():
    return _oa_row


@pytest.fixture
def oa_csv():
    return _oa_csv


@pytest.fixture
def ad_list_file(tmp_path):
    path = tmp_path / "ad_list.go"
    path.write_text(
        "package data\n"
        "\n"
        "// AdList: lista de estaciones METAR\n"
        "var AdList = []string{\n"
        '\t"OLD1;;Old station;XX;1.000;2.000",\n'
        "}\n",
        encoding="utf-8",
    )
    return path
