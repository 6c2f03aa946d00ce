"""Kraken REST API client"""

__version__ = "0.1.0"

from krakenapi.config import KrakenConfig
from krakenapi.rest.api import get_api
