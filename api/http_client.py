"""
Cliente HTTP para descargar los listados de estaciones.
Una sola petición por URL, con timeout y sin reintentos.
"""
import logging
import time
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """
    Error al descargar una fuente.

    kind: "timeout", "network" (transporte), "http" (status no 2xx)
    o "body" (fallo leyendo el cuerpo tras un status correcto).
    """

    def __init__(self, kind: str, url: str, detail: str, status_code: Optional[int] = None):
        self.kind = kind
        self.op = "GET"
        self.url = url
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"{self.op} {url}: {detail}")


def _strip_one_newline(text: str) -> str:
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def fetch_text(url: str, timeout_s: float, encoding: str = "utf-8") -> str:
    """
    Descarga `url` y devuelve el cuerpo como texto, sin el último salto de línea.

    Lanza FetchError si falla el transporte, el status no es 2xx o no se
    puede leer el cuerpo.
    """
    if timeout_s <= 0:
        raise ValueError(f"timeout_s debe ser > 0 (recibido {timeout_s})")

    logger.info(f"Descargando {url} (timeout {timeout_s}s)")

    deadline = time.monotonic() + timeout_s
    try:
        r = requests.get(url, timeout=timeout_s, stream=True)
    except requests.Timeout as e:
        raise FetchError("timeout", url, f"timeout tras {timeout_s}s ({e})") from e
    except requests.RequestException as e:
        raise FetchError("network", url, str(e)) from e

    with r:
        if not 200 <= r.status_code < 300:
            raise FetchError(
                "http", url, f"HTTP error: {r.status_code} {r.reason or ''}".rstrip(), r.status_code
            )

        # El timeout de requests es por lectura: el plazo total se controla aquí
        chunks = []
        try:
            for chunk in r.iter_content(chunk_size=8192):
                if chunk:
                    chunks.append(chunk)
                if time.monotonic() > deadline:
                    raise FetchError("timeout", url, f"descarga no completada en {timeout_s}s")
        except requests.Timeout as e:
            raise FetchError("timeout", url, f"timeout tras {timeout_s}s ({e})") from e
        except requests.RequestException as e:
            raise FetchError("body", url, f"error leyendo el cuerpo de la respuesta ({e})") from e

    raw = b"".join(chunks)

    logger.info(f"{url}: {len(raw) / 1024:.1f} KB descargados")
    return _strip_one_newline(raw.decode(encoding, errors="replace"))
