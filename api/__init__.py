"""
Módulo API
"""
from .http_client import FetchError, fetch_text

__all__ = [
    'FetchError',
    'fetch_text',
]
