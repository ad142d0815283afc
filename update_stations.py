#!/usr/bin/env python3
"""
Actualiza la lista de estaciones METAR (ad_list.go).

Combina el listado NOAA (qué estaciones emiten METAR) con OurAirports
(nombres, código IATA, país y coordenadas) y reescribe la sección de
datos de ad_list.go a partir de la línea `var AdList`.

Uso:
  python3 update_stations.py --output /ruta/a/ad_list.go
  python3 update_stations.py --dry-run > estaciones.txt

Aviso: no cambiar la declaración `var AdList` en ad_list.go,
funciona como marcador para este script.
"""
import argparse
import logging
import sys

from api.http_client import FetchError
from config import (
    AD_LIST_MARKER,
    AD_LIST_PATH,
    NOAA_STATIONS_URL,
    OURAIRPORTS_URL,
    STATIONS_TIMEOUT_SECONDS,
)
from providers.base import SourceFormatError
from services.ad_list import RegistryFileError, render_records
from services.update import UpdateConfig, run_update

logger = logging.getLogger("update_stations")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Actualiza la lista de estaciones METAR (ad_list.go)")
    parser.add_argument("--primary-url", default=NOAA_STATIONS_URL)
    parser.add_argument("--secondary-url", default=OURAIRPORTS_URL)
    parser.add_argument("--output", default=AD_LIST_PATH)
    parser.add_argument("--timeout", type=float, default=STATIONS_TIMEOUT_SECONDS)
    parser.add_argument("--marker", default=AD_LIST_MARKER)
    parser.add_argument("--dry-run", action="store_true", help="Imprime los registros sin tocar ad_list.go")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)
    if args.timeout <= 0:
        parser.error("--timeout debe ser > 0")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = UpdateConfig(
        primary_url=args.primary_url,
        secondary_url=args.secondary_url,
        output_path=args.output,
        timeout_s=args.timeout,
        marker=args.marker,
    )

    try:
        result = run_update(config, dry_run=args.dry_run)
    except (FetchError, SourceFormatError, RegistryFileError) as e:
        logger.error(f"❌ {e}")
        return 1

    if args.dry_run:
        sys.stdout.write(render_records(result.stations))
        return 0

    print(
        f"\n {len(result.stations)} records updated in {result.elapsed_s:.3f} sec.\n"
        f" you can now recompile metar.go with the updated stations.\n"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
